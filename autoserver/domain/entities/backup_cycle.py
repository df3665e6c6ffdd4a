"""
BackupCycle Entity - Un cycle flush -> backup -> prune.

Responsabilite unique:
----------------------
Suivre l'etat d'un cycle declenche par un tick du scheduler.

Transitions:
------------
    IDLE -> AWAITING_FLUSH -> AWAITING_BACKUP -> PRUNING -> COMPLETED
    IDLE -> AWAITING_BACKUP (pas de flush necessaire)
    AWAITING_BACKUP -> FAILED (backup en echec)
    IDLE / AWAITING_BACKUP -> ABORTED (commande de backup absente)
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class CycleState(Enum):
    """Etats possibles d'un cycle."""

    IDLE = "idle"                        # Cree, rien d'emis
    AWAITING_FLUSH = "awaiting_flush"    # /save emis, callback attendu
    AWAITING_BACKUP = "awaiting_backup"  # /genbackup emis, callback attendu
    PRUNING = "pruning"                  # Nettoyage des anciens backups
    COMPLETED = "completed"              # Backup reussi, nettoyage fait
    FAILED = "failed"                    # Backup en echec
    ABORTED = "aborted"                  # Commande de backup absente


class InvalidCycleTransition(Exception):
    """Raised when a cycle is moved out of order."""


@dataclass
class BackupCycle:
    """
    Entite BackupCycle.

    Attributes:
        id: Identifiant unique du cycle.
        state: Etat actuel.
        started_at: Date du tick.
        completed_at: Date de fin.
        flushed: True si un flush a ete emis pendant le cycle.
        deleted: Backups supprimes par le nettoyage.
        error: Message d'erreur si echec ou abandon.
    """

    id: UUID = field(default_factory=uuid4)
    state: CycleState = CycleState.IDLE
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None
    flushed: bool = False
    deleted: list[str] = field(default_factory=list)
    error: Optional[str] = None

    def await_flush(self) -> None:
        """Le flush a ete emis."""
        self._move(CycleState.AWAITING_FLUSH, CycleState.IDLE)
        self.flushed = True

    def await_backup(self) -> None:
        """Le backup a ete emis."""
        self._move(CycleState.AWAITING_BACKUP, CycleState.IDLE, CycleState.AWAITING_FLUSH)

    def prune(self) -> None:
        """Le backup a reussi, debut du nettoyage."""
        self._move(CycleState.PRUNING, CycleState.AWAITING_BACKUP)

    def complete(self, deleted: list[str]) -> None:
        """Termine le cycle avec succes."""
        self._move(CycleState.COMPLETED, CycleState.PRUNING)
        self.deleted = list(deleted)
        self.completed_at = datetime.now()

    def fail(self, error: str) -> None:
        """Termine le cycle sur un backup en echec."""
        self._move(CycleState.FAILED, CycleState.AWAITING_BACKUP)
        self.error = error
        self.completed_at = datetime.now()

    def abort(self, error: str) -> None:
        """Abandonne le cycle (environnement incomplet)."""
        if self.is_finished:
            raise InvalidCycleTransition(f"{self.state.value} -> {CycleState.ABORTED.value}")
        self.state = CycleState.ABORTED
        self.error = error
        self.completed_at = datetime.now()

    @property
    def is_finished(self) -> bool:
        """True si le cycle est termine (succes, echec ou abandon)."""
        return self.state in (
            CycleState.COMPLETED,
            CycleState.FAILED,
            CycleState.ABORTED,
        )

    @property
    def duration_seconds(self) -> Optional[float]:
        """Duree du cycle en secondes."""
        if self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None

    def _move(self, target: CycleState, *allowed_from: CycleState) -> None:
        if self.state not in allowed_from:
            raise InvalidCycleTransition(f"{self.state.value} -> {target.value}")
        self.state = target
