"""
Adapters d'infrastructure.

Implementations des ports de l'application.

Adapters disponibles:
---------------------
- SubprocessHostCommand: Commande de l'hote executee par le shell
- MemoryCommandRegistry / MemoryHostCommand: Registre in-memory (dev/tests)
- MemoryArtifactStore: Backups synthetiques (dev/tests)
- LoggingNotificationSink: Messages vers le log du serveur
- MemoryNotificationSink: Messages en memoire (tests)
"""

from autoserver.infrastructure.adapters.memory_artifact_store import MemoryArtifactStore
from autoserver.infrastructure.adapters.memory_command_registry import (
    MemoryCommandRegistry,
    MemoryHostCommand,
)
from autoserver.infrastructure.adapters.notification_sinks import (
    LoggingNotificationSink,
    MemoryNotificationSink,
)
from autoserver.infrastructure.adapters.subprocess_command import SubprocessHostCommand

__all__ = [
    "SubprocessHostCommand",
    "MemoryCommandRegistry",
    "MemoryHostCommand",
    "MemoryArtifactStore",
    "LoggingNotificationSink",
    "MemoryNotificationSink",
]
