"""
Tests unitaires pour le Container d'injection de dependances.
"""

from datetime import timedelta

import pytest
from apscheduler.schedulers.background import BackgroundScheduler

from autoserver.infrastructure.adapters import (
    LoggingNotificationSink,
    MemoryCommandRegistry,
    SubprocessHostCommand,
)
from autoserver.infrastructure.backup.scheduler import JOB_ID
from autoserver.infrastructure.backup.storage import FileSystemArtifactStore
from autoserver.infrastructure.container import Container, build_shell_registry


@pytest.fixture
def aps():
    scheduler = BackgroundScheduler()
    yield scheduler
    if scheduler.running:
        scheduler.shutdown(wait=False)


class TestContainer:
    """Tests pour Container."""

    def test_create_with_defaults(self, settings, aps):
        """Sans dependances: stockage disque, log, commandes shell."""
        container = Container.create(settings, scheduler=aps)

        assert isinstance(container.artifact_store, FileSystemArtifactStore)
        assert isinstance(container.notifier, LoggingNotificationSink)
        assert isinstance(container.command_registry, MemoryCommandRegistry)
        assert container.executor is not None
        container.detach()

    def test_create_with_host_dependencies(self, settings, registry, store, notifier, aps):
        """Les dependances de l'hote sont utilisees telles quelles."""
        container = Container.create(
            settings,
            command_registry=registry,
            artifact_store=store,
            notifier=notifier,
            scheduler=aps,
        )

        assert container.command_registry is registry
        assert container.artifact_store is store
        assert container.notifier is notifier
        assert container.executor is None

    def test_attach_starts_boot_interval(self, settings, registry, aps):
        """attach() demarre les backups toutes les 60 minutes."""
        container = Container.create(settings, command_registry=registry, scheduler=aps)

        container.attach()

        assert container.scheduler.interval_minutes == 60
        assert aps.get_job(JOB_ID).trigger.interval == timedelta(minutes=60)

    def test_command_handler_drives_scheduler(self, settings, registry, aps):
        """La commande /autoserver pilote le scheduler du conteneur."""
        container = Container.create(settings, command_registry=registry, scheduler=aps)
        container.attach()

        response = container.command_handler.handle("start 15")

        assert response.success
        assert container.scheduler.interval_minutes == 15
        assert len(aps.get_jobs()) == 1

    def test_detach(self, settings, registry, aps):
        """detach() arrete le scheduler."""
        container = Container.create(settings, command_registry=registry, scheduler=aps)
        container.attach()

        container.detach()

        assert not aps.running
        assert not container.scheduler.is_running


class TestBuildShellRegistry:
    """Tests pour build_shell_registry."""

    def test_empty_commands_not_registered(self, settings):
        """Sans ligne shell, aucune commande n'est enregistree."""
        registry, executor = build_shell_registry(settings)

        assert registry.names() == []
        executor.shutdown()

    def test_shell_commands_registered(self, settings):
        """Chaque ligne shell devient une commande de l'hote."""
        settings = settings.model_copy(update={
            "flush_shell_command": "./save.sh",
            "backup_shell_command": "./genbackup.sh",
        })

        registry, executor = build_shell_registry(settings)

        assert registry.names() == ["genbackup", "save"]
        assert isinstance(registry.get("save"), SubprocessHostCommand)
        executor.shutdown()
