"""
FileSystemArtifactStore - Backups dans un repertoire local.

Responsabilite unique:
----------------------
Lister et supprimer les fichiers de backup ecrits par /genbackup.

Usage:
------
    store = FileSystemArtifactStore(settings.backup_path, ".vcdbs")
    artifacts = store.list("myworld")
    store.delete("myworld-2024-01-15.vcdbs")
"""

from datetime import datetime
from glob import escape
from pathlib import Path
from typing import List

from autoserver.application.ports.artifact_store import ArtifactStore, DeletionResult
from autoserver.domain.entities.backup_artifact import BackupArtifact
from autoserver.infrastructure.backup.config import AutoServerSettings
from autoserver.infrastructure.logging import get_logger

logger = get_logger(__name__)


def creation_time(path: Path) -> datetime:
    """
    Date de creation d'un fichier.

    st_birthtime quand la plateforme l'enregistre, sinon st_mtime
    (un backup n'est jamais modifie apres son ecriture).
    """
    stat = path.stat()
    timestamp = getattr(stat, "st_birthtime", None) or stat.st_mtime
    return datetime.fromtimestamp(timestamp)


class FileSystemArtifactStore(ArtifactStore):
    """
    Stockage des backups dans un repertoire.

    Seul le premier niveau du repertoire est parcouru.
    """

    def __init__(self, backup_dir: Path, extension: str = ".vcdbs"):
        """
        Initialise le stockage.

        Args:
            backup_dir: Repertoire des backups.
            extension: Extension des fichiers de backup.
        """
        self._backup_dir = Path(backup_dir)
        self._extension = extension

    @classmethod
    def from_settings(cls, settings: AutoServerSettings) -> "FileSystemArtifactStore":
        """Cree le stockage depuis la configuration."""
        return cls(settings.backup_path, settings.artifact_extension)

    @property
    def backup_dir(self) -> Path:
        return self._backup_dir

    def delete(self, identity: str) -> DeletionResult:
        """Supprime un backup, les erreurs d'E/S sont renvoyees."""
        if Path(identity).name != identity:
            return DeletionResult(identity, False, "identity must be a plain file name")

        filepath = self._backup_dir / identity
        try:
            filepath.unlink()
        except OSError as e:
            return DeletionResult(identity, False, str(e))

        return DeletionResult(identity, True)

    def list(self, scope_filter: str) -> List[BackupArtifact]:
        """
        Liste les backups dont le nom commence par scope_filter.

        Args:
            scope_filter: Nom du monde sans extension.

        Returns:
            Backups trouves, repertoire absent = liste vide.
        """
        if not self._backup_dir.is_dir():
            return []

        pattern = f"{escape(scope_filter)}*{self._extension}"
        artifacts = []

        for filepath in sorted(self._backup_dir.glob(pattern)):
            if not filepath.is_file():
                continue
            try:
                created_at = creation_time(filepath)
            except OSError as e:
                # Supprime entre le glob et le stat
                logger.warning("backup_stat_failed", filename=filepath.name, error=str(e))
                continue
            artifacts.append(BackupArtifact(filepath.name, created_at))

        return artifacts
