"""
AutoBackupScheduler - Planificateur des backups automatiques.

Responsabilite unique:
----------------------
Declencher un cycle de backup a intervalle fixe.

Usage:
------
    scheduler = AutoBackupScheduler(settings, orchestrator)
    scheduler.start(30)   # Toutes les 30 minutes, en arriere-plan
    scheduler.stop()      # Plus de ticks
    scheduler.shutdown()  # Arret du thread (detach de l'hote)
"""

from datetime import datetime
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.schedulers.base import BaseScheduler
from apscheduler.triggers.interval import IntervalTrigger

from autoserver.infrastructure.backup.config import AutoServerSettings
from autoserver.infrastructure.backup.orchestrator import BackupOrchestrator
from autoserver.infrastructure.logging import get_logger

logger = get_logger(__name__)

JOB_ID = "auto_backup"


class AutoBackupScheduler:
    """
    Planificateur des backups automatiques.

    Un seul job a la fois: start() remplace le precedent au lieu
    d'en empiler un second. L'intervalle suit l'horloge murale,
    un cycle trop long n'empeche pas le tick suivant.
    """

    def __init__(
        self,
        settings: AutoServerSettings,
        orchestrator: BackupOrchestrator,
        scheduler: Optional[BaseScheduler] = None,
    ):
        """
        Initialise le scheduler.

        Args:
            settings: Configuration des sauvegardes.
            orchestrator: Orchestrateur appele a chaque tick.
            scheduler: Scheduler APScheduler (defaut: BackgroundScheduler).
        """
        self._settings = settings
        self._orchestrator = orchestrator
        self._scheduler = scheduler or BackgroundScheduler()
        self._interval_minutes: Optional[int] = None

    def start(self, interval_minutes: int) -> int:
        """
        Demarre (ou redemarre) les backups automatiques.

        Un intervalle nul ou negatif est remplace par
        default_interval_minutes.

        Args:
            interval_minutes: Minutes entre deux cycles.

        Returns:
            Intervalle effectivement applique.
        """
        self.stop()

        minutes = interval_minutes
        if not minutes or minutes <= 0:
            minutes = self._settings.default_interval_minutes

        if not self._scheduler.running:
            self._scheduler.start()

        self._scheduler.add_job(
            self._on_tick,
            trigger=IntervalTrigger(minutes=minutes),
            id=JOB_ID,
            name="Auto backup",
            replace_existing=True,
        )
        self._interval_minutes = minutes

        logger.info("auto_backups_enabled", interval_minutes=minutes)
        return minutes

    def stop(self) -> None:
        """Arrete les ticks, sans toucher a un cycle deja lance."""
        if self._scheduler.get_job(JOB_ID) is not None:
            self._scheduler.remove_job(JOB_ID)
        self._interval_minutes = None

        logger.info("auto_backups_disabled")

    def shutdown(self) -> None:
        """Arrete le thread du scheduler."""
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        self._interval_minutes = None

    def _on_tick(self) -> None:
        """Execute un cycle; aucune exception ne remonte."""
        try:
            self._orchestrator.run_cycle()
        except Exception as e:
            logger.exception("cycle_failed", error=str(e))

    @property
    def is_running(self) -> bool:
        """Retourne True si les backups automatiques sont actifs."""
        return self._interval_minutes is not None

    @property
    def interval_minutes(self) -> Optional[int]:
        return self._interval_minutes

    @property
    def next_run(self) -> Optional[datetime]:
        """Retourne la prochaine execution planifiee."""
        job = self._scheduler.get_job(JOB_ID)
        if job:
            return job.next_run_time
        return None
