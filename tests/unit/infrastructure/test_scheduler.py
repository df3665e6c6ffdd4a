"""
Tests unitaires pour le scheduler des backups automatiques.
"""

from datetime import timedelta
from unittest.mock import Mock

import pytest
from apscheduler.schedulers.background import BackgroundScheduler
from structlog.testing import capture_logs

from autoserver.infrastructure.backup.orchestrator import BackupOrchestrator
from autoserver.infrastructure.backup.scheduler import JOB_ID, AutoBackupScheduler


@pytest.fixture
def aps():
    """BackgroundScheduler reel, arrete en fin de test."""
    scheduler = BackgroundScheduler()
    yield scheduler
    if scheduler.running:
        scheduler.shutdown(wait=False)


@pytest.fixture
def orchestrator() -> Mock:
    return Mock(spec=BackupOrchestrator)


@pytest.fixture
def auto(settings, orchestrator, aps) -> AutoBackupScheduler:
    return AutoBackupScheduler(settings, orchestrator, aps)


class TestStartStop:
    """Tests de start/stop."""

    def test_start(self, auto, aps):
        """start() planifie un job unique a l'intervalle demande."""
        applied = auto.start(15)

        assert applied == 15
        assert auto.is_running
        assert auto.interval_minutes == 15
        assert aps.running
        job = aps.get_job(JOB_ID)
        assert job.trigger.interval == timedelta(minutes=15)
        assert auto.next_run is not None

    def test_restart_replaces_previous_job(self, auto, aps):
        """start(30) puis start(20): un seul job, toutes les 20 minutes."""
        auto.start(30)
        auto.start(20)

        jobs = aps.get_jobs()
        assert len(jobs) == 1
        assert jobs[0].trigger.interval == timedelta(minutes=20)
        assert auto.interval_minutes == 20

    @pytest.mark.parametrize("minutes", [0, -5])
    def test_non_positive_interval_uses_default(self, auto, aps, minutes):
        """Un intervalle nul ou negatif prend la valeur par defaut (30)."""
        assert auto.start(minutes) == 30
        assert aps.get_job(JOB_ID).trigger.interval == timedelta(minutes=30)

    def test_stop(self, auto, aps):
        """stop() retire le job, le thread reste disponible."""
        auto.start(10)

        with capture_logs() as logs:
            auto.stop()

        assert aps.get_job(JOB_ID) is None
        assert not auto.is_running
        assert auto.next_run is None
        assert [e["event"] for e in logs] == ["auto_backups_disabled"]

    def test_stop_when_idle(self, auto):
        """stop() sans job actif ne leve pas."""
        auto.stop()
        assert not auto.is_running

    def test_start_after_stop(self, auto, aps):
        """Les backups peuvent etre relances apres un arret."""
        auto.start(10)
        auto.stop()
        auto.start(5)

        assert len(aps.get_jobs()) == 1
        assert auto.interval_minutes == 5

    def test_shutdown(self, auto, aps):
        """shutdown() arrete le thread du scheduler."""
        auto.start(10)
        auto.shutdown()

        assert not aps.running
        assert not auto.is_running


class TestTick:
    """Tests du tick."""

    def test_tick_runs_cycle(self, auto, orchestrator):
        """Chaque tick lance un cycle."""
        auto._on_tick()
        orchestrator.run_cycle.assert_called_once_with()

    def test_job_targets_tick(self, auto, aps):
        """Le job planifie appelle le tick."""
        auto.start(10)
        assert aps.get_job(JOB_ID).func == auto._on_tick

    def test_tick_contains_errors(self, auto, orchestrator):
        """Une erreur du cycle est loguee et n'arrete pas le scheduler."""
        orchestrator.run_cycle.side_effect = RuntimeError("boom")

        with capture_logs() as logs:
            auto._on_tick()

        assert logs[0]["event"] == "cycle_failed"
        assert logs[0]["error"] == "boom"
