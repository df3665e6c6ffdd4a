"""
Notification Entity - Message diffuse aux joueurs/operateurs.

Responsabilite unique:
----------------------
Representer un message de resultat de backup et son texte affiche.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

MESSAGE_PREFIX = "[Auto Server Management]"


class NotificationType(Enum):
    """Types de notifications."""

    INFO = "info"
    BACKUP_COMPLETED = "backup_completed"
    BACKUP_FAILED = "backup_failed"


@dataclass
class Notification:
    """
    Entite Notification.

    Attributes:
        type: Type de notification.
        message: Message sans horodatage.
        created_at: Date de creation.
    """

    type: NotificationType
    message: str
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def text(self) -> str:
        """
        Texte diffuse, horodate au format d.M.yyyy HH:mm:ss.

        Example:
            >>> Notification.backup_completed(datetime(2024, 3, 5, 8, 4, 9)).text
            '[5.3.2024 08:04:09][Auto Server Management] World backup completed successfully!'
        """
        ts = self.created_at
        stamp = f"{ts.day}.{ts.month}.{ts.year} {ts:%H:%M:%S}"
        return f"[{stamp}]{MESSAGE_PREFIX} {self.message}"

    @classmethod
    def backup_completed(cls, created_at: datetime | None = None) -> "Notification":
        """Notification de backup reussi."""
        return cls(
            type=NotificationType.BACKUP_COMPLETED,
            message="World backup completed successfully!",
            created_at=created_at or datetime.now(),
        )

    @classmethod
    def backup_failed(cls, created_at: datetime | None = None) -> "Notification":
        """Notification de backup en echec."""
        return cls(
            type=NotificationType.BACKUP_FAILED,
            message="World backup failed! Please contact the server admin",
            created_at=created_at or datetime.now(),
        )
