"""
HostCommand Port - Interface des commandes de l'hote (/save, /genbackup).

Responsabilite unique:
----------------------
Definir le contrat pour invoquer une commande de l'hote dont le
resultat arrive plus tard, par callback.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from autoserver.domain.exceptions import CommandUnavailableError


@dataclass(frozen=True)
class CommandResult:
    """
    Resultat d'une commande de l'hote.

    Attributes:
        success: True si la commande a reussi.
        message: Message de statut renvoye par l'hote.
    """

    success: bool
    message: str = ""

    @classmethod
    def ok(cls, message: str = "") -> "CommandResult":
        return cls(success=True, message=message)

    @classmethod
    def error(cls, message: str) -> "CommandResult":
        return cls(success=False, message=message)


CommandCallback = Callable[[CommandResult], None]


class HostCommand(ABC):
    """
    Interface d'une commande de l'hote.

    `execute` rend la main immediatement; le callback est appele
    une seule fois quand la commande se termine, eventuellement
    depuis un autre thread.
    """

    name: str = ""

    @abstractmethod
    def execute(self, on_complete: CommandCallback) -> None:
        """
        Lance la commande.

        Args:
            on_complete: Appele avec le CommandResult a la fin.
        """
        pass


class CommandRegistry(ABC):
    """
    Interface du registre de commandes de l'hote.

    Les implementations possibles:
    - MemoryCommandRegistry: Pour dev/tests
    - Registre de l'hote (serveur de jeu, etc.)
    """

    @abstractmethod
    def get(self, name: str) -> Optional[HostCommand]:
        """
        Recupere une commande par son nom.

        Args:
            name: Nom de la commande, sans le slash.

        Returns:
            HostCommand si enregistree, None sinon.
        """
        pass

    def require(self, name: str) -> HostCommand:
        """
        Recupere une commande obligatoire.

        Raises:
            CommandUnavailableError: Si la commande n'est pas enregistree.
        """
        command = self.get(name)
        if command is None:
            raise CommandUnavailableError(name)
        return command
