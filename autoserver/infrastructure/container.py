"""
Container d'injection de dependances.

Ce module fournit un conteneur qui initialise et connecte
tous les composants: adapters, orchestrateur, scheduler, commande.
Il est cree une fois quand l'hote charge le module (attach) et
demonte quand il le decharge (detach).
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from apscheduler.schedulers.base import BaseScheduler

from autoserver.application.ports.artifact_store import ArtifactStore
from autoserver.application.ports.host_commands import CommandRegistry
from autoserver.application.ports.notification_sink import NotificationSink
from autoserver.infrastructure.adapters.memory_command_registry import MemoryCommandRegistry
from autoserver.infrastructure.adapters.notification_sinks import LoggingNotificationSink
from autoserver.infrastructure.adapters.subprocess_command import SubprocessHostCommand
from autoserver.infrastructure.backup.config import AutoServerSettings, get_settings
from autoserver.infrastructure.backup.orchestrator import BackupOrchestrator
from autoserver.infrastructure.backup.scheduler import AutoBackupScheduler
from autoserver.infrastructure.backup.storage import FileSystemArtifactStore
from autoserver.presentation.commands.autoserver_command import AutoServerCommandHandler


def build_shell_registry(
    settings: AutoServerSettings,
) -> tuple[MemoryCommandRegistry, ThreadPoolExecutor]:
    """
    Registre des commandes definies par shell dans la configuration.

    Une commande sans ligne shell n'est pas enregistree: le flush est
    alors saute et le backup abandonne, comme avec un hote qui
    n'expose pas /save ou /genbackup.
    """
    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="host_command")
    registry = MemoryCommandRegistry()

    for name, shell_command in (
        (settings.flush_command_name, settings.flush_shell_command),
        (settings.backup_command_name, settings.backup_shell_command),
    ):
        if shell_command:
            registry.register(SubprocessHostCommand(name, shell_command, executor))

    return registry, executor


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Example:
        >>> container = Container.create(settings)
        >>> container.attach()          # Backups toutes les 60 minutes
        >>> container.command_handler.handle("start 15")
        >>> container.detach()
    """

    settings: AutoServerSettings
    command_registry: CommandRegistry
    artifact_store: ArtifactStore
    notifier: NotificationSink
    orchestrator: BackupOrchestrator
    scheduler: AutoBackupScheduler
    command_handler: AutoServerCommandHandler

    # Pool des commandes shell (si cree par le conteneur)
    executor: Optional[ThreadPoolExecutor] = None

    @classmethod
    def create(
        cls,
        settings: Optional[AutoServerSettings] = None,
        command_registry: Optional[CommandRegistry] = None,
        artifact_store: Optional[ArtifactStore] = None,
        notifier: Optional[NotificationSink] = None,
        scheduler: Optional[BaseScheduler] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> "Container":
        """
        Factory pour creer un conteneur avec toutes les dependances.

        Args:
            settings: Configuration (defaut: variables d'environnement).
            command_registry: Registre de l'hote (defaut: commandes shell).
            artifact_store: Stockage (defaut: repertoire de backups).
            notifier: Diffusion (defaut: log du serveur).
            scheduler: Scheduler APScheduler (defaut: BackgroundScheduler).
            clock: Source de l'heure (tests).

        Returns:
            Container configure avec tous les composants.
        """
        settings = settings or get_settings()

        executor = None
        if command_registry is None:
            command_registry, executor = build_shell_registry(settings)

        artifact_store = artifact_store or FileSystemArtifactStore.from_settings(settings)
        notifier = notifier or LoggingNotificationSink()

        orchestrator = BackupOrchestrator(
            settings,
            command_registry,
            artifact_store,
            notifier,
            clock=clock,
        )
        backup_scheduler = AutoBackupScheduler(settings, orchestrator, scheduler)
        command_handler = AutoServerCommandHandler(backup_scheduler, notifier, settings)

        return cls(
            settings=settings,
            command_registry=command_registry,
            artifact_store=artifact_store,
            notifier=notifier,
            orchestrator=orchestrator,
            scheduler=backup_scheduler,
            command_handler=command_handler,
            executor=executor,
        )

    def attach(self) -> None:
        """Demarrage de l'hote: backups automatiques a l'intervalle de boot."""
        self.scheduler.start(self.settings.boot_interval_minutes)

    def detach(self) -> None:
        """Arret de l'hote: plus de ticks, pool libere."""
        self.scheduler.shutdown()
        if self.executor is not None:
            self.executor.shutdown(wait=False)
