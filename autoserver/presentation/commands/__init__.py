"""
Commandes exposees a l'hote.
"""

from autoserver.presentation.commands.autoserver_command import (
    USAGE,
    AutoServerCommandHandler,
    CommandResponse,
)

__all__ = [
    "AutoServerCommandHandler",
    "CommandResponse",
    "USAGE",
]
