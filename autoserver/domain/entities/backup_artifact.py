"""
BackupArtifact - Fichier de backup sur le stockage.

Responsabilite unique:
----------------------
Representer un backup par son nom et sa date de creation.
Le contenu du fichier reste opaque.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from autoserver.domain.exceptions import InvalidArtifactError


@dataclass(frozen=True, slots=True)
class BackupArtifact:
    """
    Un fichier de backup, immuable une fois cree.

    Attributes:
        identity: Nom du fichier, unique dans le perimetre de retention.
        created_at: Date de creation du fichier.

    Example:
        >>> artifact = BackupArtifact("world-2024.vcdbs", datetime(2024, 1, 1))
        >>> artifact.age(datetime(2024, 1, 2))
        datetime.timedelta(days=1)
    """

    identity: str
    created_at: datetime

    def __post_init__(self) -> None:
        """Valide l'identifiant apres initialisation."""
        if not self.identity or not str(self.identity).strip():
            raise InvalidArtifactError(self.identity)

    def age(self, now: datetime) -> timedelta:
        """Age de l'artefact a l'instant donne."""
        return now - self.created_at

    def __str__(self) -> str:
        return self.identity
