"""
Service de retention des backups.

Choisit les backups a conserver a partir de leur seule date de creation:
    - les N plus recents (3 par defaut), toujours;
    - pour chaque palier (1 jour, 1 semaine, 1 mois), le plus recent
      des backups au moins aussi vieux que le palier;
    - si un palier n'est pas atteint, le plus ancien de tous, pour
      qu'il finisse par l'atteindre.

Tout le reste est a supprimer.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, Optional

from autoserver.domain.entities.backup_artifact import BackupArtifact


class AgeBucket(Enum):
    """Paliers d'age representes dans les backups conserves."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


# Un "mois" vaut exactement 30 x 24h, sans calendrier
DEFAULT_BUCKETS: dict[AgeBucket, timedelta] = {
    AgeBucket.DAY: timedelta(days=1),
    AgeBucket.WEEK: timedelta(days=7),
    AgeBucket.MONTH: timedelta(days=30),
}

DEFAULT_KEEP_NEWEST = 3


@dataclass(frozen=True)
class RetentionDecision:
    """
    Resultat d'une passe de retention.

    Attributes:
        keep: Identifiants conserves.
        delete: Identifiants a supprimer.
        representatives: Backup retenu pour chaque palier atteint.
        fallback: Plus ancien backup conserve faute de palier complet.
    """

    keep: frozenset[str] = frozenset()
    delete: frozenset[str] = frozenset()
    representatives: dict[AgeBucket, str] = field(default_factory=dict)
    fallback: Optional[str] = None

    @property
    def unsatisfied_buckets(self) -> list[AgeBucket]:
        """Paliers sans representant."""
        return [bucket for bucket in AgeBucket if bucket not in self.representatives]

    @property
    def total(self) -> int:
        """Nombre de backups examines."""
        return len(self.keep) + len(self.delete)

    def to_dict(self) -> dict:
        """Convertit en dictionnaire (logs)."""
        return {
            "kept": len(self.keep),
            "deleted": len(self.delete),
            "representatives": {
                bucket.value: identity
                for bucket, identity in self.representatives.items()
            },
            "fallback": self.fallback,
        }


class RetentionPolicy:
    """
    Politique de retention par paliers.

    Pure: aucune E/S, l'entree n'est jamais modifiee, et deux appels
    avec la meme liste et le meme `now` donnent le meme resultat.

    Example:
        >>> policy = RetentionPolicy()
        >>> policy.select_deletions([], datetime.now())
        set()
    """

    def __init__(
        self,
        keep_newest: int = DEFAULT_KEEP_NEWEST,
        buckets: dict[AgeBucket, timedelta] | None = None,
    ) -> None:
        """
        Initialise la politique.

        Args:
            keep_newest: Nombre de backups recents toujours conserves.
            buckets: Seuils d'age par palier.
        """
        if keep_newest < 1:
            raise ValueError(f"keep_newest must be >= 1, got {keep_newest}")
        self.keep_newest = keep_newest
        self.buckets = buckets or DEFAULT_BUCKETS

    @property
    def max_kept(self) -> int:
        """Borne du nombre de backups conserves."""
        return self.keep_newest + len(self.buckets) + 1

    def decide(
        self,
        artifacts: Iterable[BackupArtifact],
        now: datetime,
    ) -> RetentionDecision:
        """
        Calcule la decision de retention.

        Args:
            artifacts: Tous les backups du perimetre, dans n'importe quel ordre.
            now: Instant de reference pour le calcul des ages.

        Returns:
            RetentionDecision avec les backups a garder et a supprimer.
        """
        # Tri stable: a date egale, l'ordre d'entree est conserve
        ordered = sorted(artifacts, key=lambda a: a.created_at, reverse=True)
        if not ordered:
            return RetentionDecision()

        keep = {artifact.identity for artifact in ordered[:self.keep_newest]}

        representatives: dict[AgeBucket, str] = {}
        for artifact in ordered:
            age = artifact.age(now)
            for bucket, threshold in self.buckets.items():
                if bucket not in representatives and age >= threshold:
                    representatives[bucket] = artifact.identity
                    keep.add(artifact.identity)

            if len(representatives) == len(self.buckets):
                break

        fallback = None
        if len(representatives) < len(self.buckets):
            fallback = ordered[-1].identity
            keep.add(fallback)

        delete = {a.identity for a in ordered if a.identity not in keep}

        return RetentionDecision(
            keep=frozenset(keep),
            delete=frozenset(delete),
            representatives=representatives,
            fallback=fallback,
        )

    def select_deletions(
        self,
        artifacts: Iterable[BackupArtifact],
        now: datetime,
    ) -> set[str]:
        """
        Retourne les identifiants des backups a supprimer.

        Args:
            artifacts: Tous les backups du perimetre.
            now: Instant de reference.

        Returns:
            Ensemble des identifiants a supprimer.
        """
        return set(self.decide(artifacts, now).delete)
