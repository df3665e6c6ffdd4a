"""
Backup Infrastructure - Sauvegarde automatisee.

Responsabilite:
---------------
Declencher les backups de l'hote et nettoyer les anciens.

Features:
---------
- Backup periodique (intervalle en minutes)
- /save force si le dernier est trop ancien
- Retention par paliers (3 recents + 1 jour / 1 semaine / 1 mois)
"""

from autoserver.infrastructure.backup.config import AutoServerSettings, get_settings
from autoserver.infrastructure.backup.orchestrator import BackupOrchestrator
from autoserver.infrastructure.backup.scheduler import AutoBackupScheduler
from autoserver.infrastructure.backup.storage import FileSystemArtifactStore

__all__ = [
    "AutoServerSettings",
    "get_settings",
    "BackupOrchestrator",
    "AutoBackupScheduler",
    "FileSystemArtifactStore",
]
