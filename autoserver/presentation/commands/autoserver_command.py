"""
Commande /autoserver - Demarrer ou arreter les backups automatiques.

Usage:
------
    /autoserver start [minutes]   (defaut: 30)
    /autoserver stop
"""

from dataclasses import dataclass
from typing import Optional

from autoserver.application.ports.notification_sink import NotificationSink
from autoserver.domain.entities.notification import MESSAGE_PREFIX
from autoserver.domain.exceptions import UnknownSubcommandError
from autoserver.infrastructure.backup.config import AutoServerSettings
from autoserver.infrastructure.backup.scheduler import AutoBackupScheduler
from autoserver.infrastructure.logging import get_logger

logger = get_logger(__name__)

USAGE = "Usage: /autoserver start <minutes> or /autoserver stop"
DESCRIPTION = (
    "Start or stop auto-backups. "
    "Usage: /autoserver start <minutes> or /autoserver stop."
)


@dataclass(frozen=True)
class CommandResponse:
    """
    Reponse renvoyee a l'hote.

    Attributes:
        success: False pour une commande invalide.
        message: Message de statut.
    """

    success: bool
    message: str = ""


class AutoServerCommandHandler:
    """
    Traitement de la commande /autoserver.

    La reponse part vers l'emetteur; sans emetteur (console),
    elle est ecrite dans le log.
    """

    name = "autoserver"

    def __init__(
        self,
        scheduler: AutoBackupScheduler,
        notifier: NotificationSink,
        settings: AutoServerSettings,
    ):
        self._scheduler = scheduler
        self._notifier = notifier
        self._settings = settings

    def handle(self, args: str, caller: Optional[str] = None) -> CommandResponse:
        """
        Execute la commande.

        Args:
            args: Arguments apres /autoserver.
            caller: Joueur emetteur, None pour la console.

        Returns:
            CommandResponse.
        """
        words = args.split()
        if not words:
            self._reply(caller, USAGE)
            return CommandResponse(True, USAGE)

        subcommand = words[0].lower()
        try:
            if subcommand == "start":
                minutes = self._parse_minutes(words[1:])
                applied = self._scheduler.start(minutes)
                message = f"Auto-backups started every {applied} minutes."
            elif subcommand == "stop":
                self._scheduler.stop()
                message = "Auto-backups stopped."
            else:
                raise UnknownSubcommandError(words[0])
        except UnknownSubcommandError as e:
            logger.warning("invalid_subcommand", subcommand=e.invalid_value, caller=caller)
            self._reply(caller, USAGE)
            return CommandResponse(False, "Invalid subcommand")

        self._reply(caller, message)
        return CommandResponse(True, message)

    def _parse_minutes(self, rest: list[str]) -> int:
        """Premier argument entier et positif, sinon la valeur par defaut."""
        if rest:
            try:
                minutes = int(rest[0])
            except ValueError:
                minutes = 0
            if minutes > 0:
                return minutes
        return self._settings.default_interval_minutes

    def _reply(self, caller: Optional[str], message: str) -> None:
        if caller:
            self._notifier.send_to(caller, message)
        else:
            logger.info("autoserver_reply", message=f"{MESSAGE_PREFIX} {message}")
