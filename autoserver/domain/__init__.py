"""
Domain Layer - Coeur metier de l'application.

Ce module contient:
    - entities/: Artefacts de backup, cycle, horloge de flush, notifications
    - services/: Politique de retention (pure)
    - exceptions: Exceptions metier

Principes:
    - AUCUNE dependance vers les couches externes
    - Logique metier pure
    - Testable sans infrastructure
"""

from autoserver.domain.exceptions import (
    CommandUnavailableError,
    DomainException,
    InvalidArtifactError,
    UnknownSubcommandError,
)

__all__ = [
    "DomainException",
    "InvalidArtifactError",
    "UnknownSubcommandError",
    "CommandUnavailableError",
]
