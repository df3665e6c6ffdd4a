"""
Ports (Interfaces) de l'application.

Les ports definissent les contrats que les adapters
de l'infrastructure doivent implementer.

Ports disponibles:
    - HostCommand / CommandRegistry: Commandes de l'hote (/save, /genbackup)
    - ArtifactStore: Listing et suppression des backups
    - NotificationSink: Diffusion des messages
"""

from autoserver.application.ports.artifact_store import ArtifactStore, DeletionResult
from autoserver.application.ports.host_commands import (
    CommandCallback,
    CommandRegistry,
    CommandResult,
    HostCommand,
)
from autoserver.application.ports.notification_sink import NotificationSink

__all__ = [
    # Commandes
    "HostCommand",
    "CommandRegistry",
    "CommandResult",
    "CommandCallback",
    # Stockage
    "ArtifactStore",
    "DeletionResult",
    # Notifications
    "NotificationSink",
]
