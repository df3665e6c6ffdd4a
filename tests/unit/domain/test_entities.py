"""
Tests unitaires pour les Entites du domaine.
"""

from datetime import datetime, timedelta

import pytest

from autoserver.domain.entities import (
    BackupArtifact,
    BackupCycle,
    CycleState,
    FlushClock,
    InvalidCycleTransition,
    Notification,
    NotificationType,
)
from autoserver.domain.exceptions import InvalidArtifactError

NOW = datetime(2024, 6, 15, 12, 0, 0)


class TestBackupArtifact:
    """Tests pour l'entite BackupArtifact."""

    def test_create(self):
        """Test creation."""
        artifact = BackupArtifact("world-1.vcdbs", NOW)
        assert artifact.identity == "world-1.vcdbs"
        assert str(artifact) == "world-1.vcdbs"

    @pytest.mark.parametrize("identity", ["", "   "])
    def test_blank_identity_rejected(self, identity):
        """Un identifiant vide est refuse."""
        with pytest.raises(InvalidArtifactError):
            BackupArtifact(identity, NOW)

    def test_age(self):
        """Test age relatif a now."""
        artifact = BackupArtifact("world", NOW - timedelta(hours=25))
        assert artifact.age(NOW) == timedelta(hours=25)

    def test_immutable(self):
        """Un artefact ne peut pas etre modifie."""
        artifact = BackupArtifact("world", NOW)
        with pytest.raises(AttributeError):
            artifact.identity = "other"

    def test_equality(self):
        """Test egalite par valeur."""
        assert BackupArtifact("world", NOW) == BackupArtifact("world", NOW)


class TestFlushClock:
    """Tests pour FlushClock."""

    def test_minutes_since_flush(self):
        """Test calcul des minutes."""
        clock = FlushClock(last_flush_at=NOW)
        assert clock.minutes_since_flush(NOW + timedelta(minutes=45)) == 45

    def test_flush_due_only_past_threshold(self):
        """Le seuil doit etre strictement depasse."""
        clock = FlushClock(last_flush_at=NOW)
        assert not clock.is_flush_due(NOW + timedelta(minutes=30), 30)
        assert clock.is_flush_due(NOW + timedelta(minutes=30, seconds=1), 30)

    def test_mark_flushed(self):
        """mark_flushed remet le compteur a zero."""
        clock = FlushClock(last_flush_at=NOW)
        later = NOW + timedelta(hours=2)
        clock.mark_flushed(later)
        assert clock.last_flush_at == later
        assert not clock.is_flush_due(later, 30)


class TestBackupCycle:
    """Tests pour l'entite BackupCycle."""

    def test_create(self):
        """Test creation."""
        cycle = BackupCycle()
        assert cycle.state == CycleState.IDLE
        assert not cycle.flushed
        assert not cycle.is_finished
        assert cycle.duration_seconds is None

    def test_full_cycle_with_flush(self):
        """IDLE -> AWAITING_FLUSH -> AWAITING_BACKUP -> PRUNING -> COMPLETED."""
        cycle = BackupCycle()
        cycle.await_flush()
        assert cycle.state == CycleState.AWAITING_FLUSH
        assert cycle.flushed

        cycle.await_backup()
        cycle.prune()
        assert cycle.state == CycleState.PRUNING

        cycle.complete(["world-3h"])
        assert cycle.state == CycleState.COMPLETED
        assert cycle.deleted == ["world-3h"]
        assert cycle.is_finished
        assert cycle.duration_seconds is not None

    def test_backup_without_flush(self):
        """IDLE -> AWAITING_BACKUP directement."""
        cycle = BackupCycle()
        cycle.await_backup()
        assert cycle.state == CycleState.AWAITING_BACKUP
        assert not cycle.flushed

    def test_fail(self):
        """Un backup en echec termine le cycle."""
        cycle = BackupCycle()
        cycle.await_backup()
        cycle.fail("disk full")
        assert cycle.state == CycleState.FAILED
        assert cycle.error == "disk full"
        assert cycle.is_finished

    def test_abort_from_idle(self):
        """Un cycle non demarre peut etre abandonne."""
        cycle = BackupCycle()
        cycle.abort("no /genbackup")
        assert cycle.state == CycleState.ABORTED
        assert cycle.error == "no /genbackup"

    def test_abort_finished_cycle_rejected(self):
        """Un cycle termine ne peut plus etre abandonne."""
        cycle = BackupCycle()
        cycle.abort("first")
        with pytest.raises(InvalidCycleTransition):
            cycle.abort("second")

    def test_prune_requires_backup(self):
        """Pas de nettoyage sans backup emis."""
        cycle = BackupCycle()
        with pytest.raises(InvalidCycleTransition):
            cycle.prune()

    def test_flush_only_from_idle(self):
        """Le flush n'est emis qu'une fois, en debut de cycle."""
        cycle = BackupCycle()
        cycle.await_backup()
        with pytest.raises(InvalidCycleTransition):
            cycle.await_flush()

    def test_fail_after_complete_rejected(self):
        """Un cycle termine ne change plus d'etat."""
        cycle = BackupCycle()
        cycle.await_backup()
        cycle.prune()
        cycle.complete([])
        with pytest.raises(InvalidCycleTransition):
            cycle.fail("late")


class TestNotification:
    """Tests pour l'entite Notification."""

    def test_backup_completed_text(self):
        """Texte horodate du succes."""
        notification = Notification.backup_completed(NOW)
        assert notification.type == NotificationType.BACKUP_COMPLETED
        assert notification.text == (
            "[15.6.2024 12:00:00][Auto Server Management] "
            "World backup completed successfully!"
        )

    def test_backup_failed_text(self):
        """Texte horodate de l'echec."""
        notification = Notification.backup_failed(NOW)
        assert notification.type == NotificationType.BACKUP_FAILED
        assert notification.text.endswith(
            "[Auto Server Management] World backup failed! Please contact the server admin"
        )

    def test_day_and_month_not_padded(self):
        """Jour et mois sans zero, heure sur deux chiffres."""
        notification = Notification(
            type=NotificationType.INFO,
            message="hello",
            created_at=datetime(2024, 3, 5, 8, 4, 9),
        )
        assert notification.text == "[5.3.2024 08:04:09][Auto Server Management] hello"
