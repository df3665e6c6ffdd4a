"""
BackupOrchestrator - Cycle flush -> backup -> nettoyage.

Responsabilite unique:
----------------------
A chaque tick du scheduler:
1. Force un /save si le dernier date de plus de flush_threshold_minutes
2. Lance /genbackup une fois le /save termine (ou tout de suite)
3. Si le backup reussit, supprime les backups hors politique de retention

Les commandes de l'hote terminent par callback: aucun thread n'attend.
Un /genbackup n'est jamais emis avant le callback d'un /save requis.

Usage:
------
    orchestrator = BackupOrchestrator(settings, registry, store, notifier)
    cycle = orchestrator.run_cycle()
"""

import threading
from datetime import datetime
from typing import Callable, Optional

from autoserver.application.ports.artifact_store import ArtifactStore
from autoserver.application.ports.host_commands import CommandRegistry, CommandResult
from autoserver.application.ports.notification_sink import NotificationSink
from autoserver.domain.entities.backup_cycle import BackupCycle
from autoserver.domain.entities.flush_clock import FlushClock
from autoserver.domain.entities.notification import Notification
from autoserver.domain.exceptions import CommandUnavailableError
from autoserver.domain.services.retention_policy import RetentionPolicy
from autoserver.infrastructure.backup.config import AutoServerSettings
from autoserver.infrastructure.logging import get_logger

logger = get_logger(__name__)


class BackupOrchestrator:
    """
    Orchestrateur des cycles de backup.

    Possede l'horloge de flush. Par defaut, un tick qui arrive pendant
    un cycle encore en cours en lance un second en parallele;
    `skip_overlapping_cycles` l'ignore a la place.
    """

    def __init__(
        self,
        settings: AutoServerSettings,
        commands: CommandRegistry,
        store: ArtifactStore,
        notifier: NotificationSink,
        policy: Optional[RetentionPolicy] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialise l'orchestrateur.

        Args:
            settings: Configuration des sauvegardes.
            commands: Registre des commandes de l'hote.
            store: Stockage des backups.
            notifier: Diffusion des messages.
            policy: Politique de retention (defaut: settings.keep_newest).
            clock: Source de l'heure courante (defaut: datetime.now).
        """
        self._settings = settings
        self._commands = commands
        self._store = store
        self._notifier = notifier
        self._policy = policy or RetentionPolicy(keep_newest=settings.keep_newest)
        self._clock = clock or datetime.now
        self._flush_clock = FlushClock(self._clock())
        self._lock = threading.Lock()
        self._current: Optional[BackupCycle] = None

    @property
    def flush_clock(self) -> FlushClock:
        return self._flush_clock

    @property
    def current_cycle(self) -> Optional[BackupCycle]:
        """Dernier cycle lance."""
        return self._current

    @property
    def policy(self) -> RetentionPolicy:
        return self._policy

    def run_cycle(self) -> Optional[BackupCycle]:
        """
        Lance un cycle.

        Rend la main des que la premiere commande est emise, la suite
        se deroule dans les callbacks.

        Returns:
            Le cycle lance, None s'il a ete ignore (cycle deja en cours).
        """
        now = self._clock()

        with self._lock:
            current = self._current
            if (
                self._settings.skip_overlapping_cycles
                and current is not None
                and not current.is_finished
            ):
                logger.warning(
                    "cycle_skipped",
                    in_flight=str(current.id),
                    state=current.state.value,
                )
                return None

            cycle = BackupCycle(started_at=now)
            self._current = cycle
            flush_due = self._flush_clock.is_flush_due(
                now, self._settings.flush_threshold_minutes
            )

        try:
            if flush_due:
                self._flush_then_backup(cycle)
            else:
                self._run_backup(cycle)
        except Exception as e:
            if not cycle.is_finished:
                cycle.abort(str(e))
            raise

        return cycle

    def prune(self) -> list[str]:
        """
        Supprime les backups hors politique de retention.

        Un echec de suppression est logue et n'arrete pas la passe.

        Returns:
            Noms des backups supprimes.
        """
        artifacts = self._store.list(self._settings.world_prefix)
        if not artifacts:
            return []

        decision = self._policy.decide(artifacts, self._clock())
        logger.info("retention_decided", world=self._settings.world_prefix, **decision.to_dict())

        deleted = []
        newest_first = sorted(artifacts, key=lambda a: a.created_at, reverse=True)
        for artifact in newest_first:
            if artifact.identity not in decision.delete:
                continue

            result = self._store.delete(artifact.identity)
            if result.success:
                deleted.append(artifact.identity)
                logger.info("backup_deleted", filename=artifact.identity)
            else:
                logger.warning(
                    "backup_delete_failed",
                    filename=artifact.identity,
                    error=result.error,
                )

        return deleted

    def _flush_then_backup(self, cycle: BackupCycle) -> None:
        """Force un /save, puis /genbackup dans son callback."""
        command = self._commands.get(self._settings.flush_command_name)
        if command is None:
            logger.info("flush_unavailable", command=self._settings.flush_command_name)
            self._run_backup(cycle)
            return

        cycle.await_flush()

        def on_flushed(result: CommandResult) -> None:
            if result.success:
                logger.info("flush_completed", cycle_id=str(cycle.id))
            else:
                logger.warning("flush_failed", cycle_id=str(cycle.id), message=result.message)

            self._flush_clock.mark_flushed(self._clock())
            self._run_backup(cycle)

        command.execute(self._guarded(cycle, on_flushed))

    def _run_backup(self, cycle: BackupCycle) -> None:
        """Lance /genbackup."""
        try:
            command = self._commands.require(self._settings.backup_command_name)
        except CommandUnavailableError as e:
            logger.error("backup_command_missing", command=e.name)
            cycle.abort(e.message)
            return

        cycle.await_backup()
        command.execute(self._guarded(cycle, lambda result: self._on_backup_done(cycle, result)))

    def _on_backup_done(self, cycle: BackupCycle, result: CommandResult) -> None:
        if not result.success:
            logger.error("backup_failed", cycle_id=str(cycle.id), message=result.message)
            self._notifier.broadcast(Notification.backup_failed(self._clock()).text)
            cycle.fail(result.message or "backup command failed")
            return

        logger.info("backup_completed", cycle_id=str(cycle.id))
        self._notifier.broadcast(Notification.backup_completed(self._clock()).text)

        cycle.prune()
        deleted = self.prune()
        cycle.complete(deleted)

        logger.info(
            "cycle_completed",
            cycle_id=str(cycle.id),
            flushed=cycle.flushed,
            deleted=len(deleted),
        )

    def _guarded(
        self,
        cycle: BackupCycle,
        callback: Callable[[CommandResult], None],
    ) -> Callable[[CommandResult], None]:
        """
        Enveloppe un callback appele par l'hote.

        Une exception dans la suite du cycle est loguee et le cycle
        abandonne; rien ne remonte dans le code de l'hote.
        """

        def wrapper(result: CommandResult) -> None:
            try:
                callback(result)
            except Exception as e:
                logger.exception("cycle_failed", cycle_id=str(cycle.id), error=str(e))
                if not cycle.is_finished:
                    cycle.abort(str(e))

        return wrapper
