"""
ArtifactStore Port - Interface du stockage des backups.

Responsabilite unique:
----------------------
Lister et supprimer les fichiers de backup d'un monde.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from autoserver.domain.entities.backup_artifact import BackupArtifact


@dataclass(frozen=True)
class DeletionResult:
    """
    Resultat d'une suppression.

    Attributes:
        identity: Backup concerne.
        success: True si le fichier a ete supprime.
        error: Raison de l'echec (fichier verrouille, permission...).
    """

    identity: str
    success: bool
    error: Optional[str] = None


class ArtifactStore(ABC):
    """
    Interface pour le stockage des backups.

    Les implementations possibles:
    - FileSystemArtifactStore: Repertoire de backups local
    - MemoryArtifactStore: Pour tests
    """

    @abstractmethod
    def list(self, scope_filter: str) -> list[BackupArtifact]:
        """
        Liste les backups d'un monde.

        Args:
            scope_filter: Prefixe de nom (nom du monde sans extension).

        Returns:
            Backups du perimetre, sans ordre garanti.
        """
        pass

    @abstractmethod
    def delete(self, identity: str) -> DeletionResult:
        """
        Supprime un backup.

        Args:
            identity: Nom du fichier.

        Returns:
            DeletionResult, jamais d'exception pour un echec d'E/S.
        """
        pass
