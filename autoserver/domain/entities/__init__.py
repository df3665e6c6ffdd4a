"""
Entites du domaine.

Entites principales:
    - BackupArtifact: Fichier de backup (nom + date de creation)
    - BackupCycle: Un cycle flush -> backup -> prune et son etat
    - FlushClock: Date du dernier flush confirme
    - Notification: Message diffuse apres un backup
"""

from autoserver.domain.entities.backup_artifact import BackupArtifact
from autoserver.domain.entities.backup_cycle import (
    BackupCycle,
    CycleState,
    InvalidCycleTransition,
)
from autoserver.domain.entities.flush_clock import FlushClock
from autoserver.domain.entities.notification import Notification, NotificationType

__all__ = [
    "BackupArtifact",
    "BackupCycle",
    "CycleState",
    "InvalidCycleTransition",
    "FlushClock",
    "Notification",
    "NotificationType",
]
