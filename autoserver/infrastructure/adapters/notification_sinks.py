"""
Notification sinks - Diffusion des messages.

Adapters:
---------
- LoggingNotificationSink: Ecrit les messages dans le log du serveur
- MemoryNotificationSink: Garde les messages en memoire (tests)
"""

from threading import Lock

from autoserver.application.ports.notification_sink import NotificationSink
from autoserver.infrastructure.logging import get_logger

logger = get_logger(__name__)


class LoggingNotificationSink(NotificationSink):
    """Messages vers la console/log du serveur."""

    def broadcast(self, message: str) -> None:
        logger.info("broadcast", message=message)

    def send_to(self, recipient: str, message: str) -> None:
        logger.info("message", recipient=recipient, message=message)


class MemoryNotificationSink(NotificationSink):
    """
    Implementation in-memory du NotificationSink.

    Thread-safe avec verrou.
    """

    def __init__(self):
        """Initialise le sink."""
        self.broadcasts: list[str] = []
        self.direct: list[tuple[str, str]] = []
        self._lock = Lock()

    def broadcast(self, message: str) -> None:
        with self._lock:
            self.broadcasts.append(message)

    def send_to(self, recipient: str, message: str) -> None:
        with self._lock:
            self.direct.append((recipient, message))

    def messages_for(self, recipient: str) -> list[str]:
        """Messages envoyes a un destinataire."""
        with self._lock:
            return [message for to, message in self.direct if to == recipient]

    def clear(self) -> None:
        """Vide le sink (pour tests)."""
        with self._lock:
            self.broadcasts.clear()
            self.direct.clear()
