"""
MemoryArtifactStore - Implementation in-memory du stockage des backups.

Responsabilite unique:
----------------------
Stocker des backups synthetiques (nom + date) pour dev/tests.
"""

from threading import Lock
from typing import Iterable, List, Optional

from autoserver.application.ports.artifact_store import ArtifactStore, DeletionResult
from autoserver.domain.entities.backup_artifact import BackupArtifact


class MemoryArtifactStore(ArtifactStore):
    """
    Implementation in-memory de l'ArtifactStore.

    Thread-safe avec verrou. `locked` simule des fichiers
    impossibles a supprimer.
    """

    def __init__(
        self,
        artifacts: Optional[Iterable[BackupArtifact]] = None,
        locked: Optional[Iterable[str]] = None,
    ):
        """
        Initialise le stockage.

        Args:
            artifacts: Backups initiaux.
            locked: Noms dont la suppression echoue.
        """
        self._artifacts: dict[str, BackupArtifact] = {
            a.identity: a for a in (artifacts or [])
        }
        self._locked = set(locked or [])
        self._lock = Lock()

    def add(self, artifact: BackupArtifact) -> None:
        """Ajoute un backup."""
        with self._lock:
            self._artifacts[artifact.identity] = artifact

    def delete(self, identity: str) -> DeletionResult:
        """Supprime un backup."""
        with self._lock:
            if identity in self._locked:
                return DeletionResult(identity, False, "file is locked")
            if self._artifacts.pop(identity, None) is None:
                return DeletionResult(identity, False, "file not found")
            return DeletionResult(identity, True)

    def identities(self) -> set[str]:
        """Noms des backups presents."""
        with self._lock:
            return set(self._artifacts)

    def list(self, scope_filter: str) -> List[BackupArtifact]:
        """Backups dont le nom commence par scope_filter."""
        with self._lock:
            return [
                a for a in self._artifacts.values()
                if a.identity.startswith(scope_filter)
            ]
