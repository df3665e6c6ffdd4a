"""
MemoryCommandRegistry - Implementation in-memory du registre de commandes.

Responsabilite unique:
----------------------
Enregistrer des commandes de l'hote en memoire (dev/tests).
En production, le registre de l'hote remplace cet adapter.
"""

from threading import Lock
from typing import Optional

from autoserver.application.ports.host_commands import (
    CommandCallback,
    CommandRegistry,
    CommandResult,
    HostCommand,
)


class MemoryHostCommand(HostCommand):
    """
    Commande factice au resultat fixe.

    En mode differe, les callbacks sont gardes jusqu'a complete():
    utile pour verifier qu'une etape attend bien la precedente.
    """

    def __init__(
        self,
        name: str,
        result: Optional[CommandResult] = None,
        deferred: bool = False,
    ):
        """
        Initialise la commande.

        Args:
            name: Nom de la commande.
            result: Resultat renvoye (defaut: succes).
            deferred: True pour attendre un appel a complete().
        """
        self.name = name
        self.result = result or CommandResult.ok()
        self.deferred = deferred
        self.calls = 0
        self._pending: list[CommandCallback] = []
        self._lock = Lock()

    def execute(self, on_complete: CommandCallback) -> None:
        """Termine tout de suite, ou met le callback en attente."""
        with self._lock:
            self.calls += 1
            if self.deferred:
                self._pending.append(on_complete)
                return
        on_complete(self.result)

    def complete(self, result: Optional[CommandResult] = None) -> int:
        """
        Termine les executions en attente.

        Returns:
            Nombre de callbacks appeles.
        """
        with self._lock:
            pending, self._pending = self._pending, []
        for callback in pending:
            callback(result or self.result)
        return len(pending)

    @property
    def pending_count(self) -> int:
        return len(self._pending)


class MemoryCommandRegistry(CommandRegistry):
    """
    Implementation in-memory du CommandRegistry.

    Thread-safe avec verrou.
    """

    def __init__(self):
        """Initialise le registre."""
        self._commands: dict[str, HostCommand] = {}
        self._lock = Lock()

    def register(self, command: HostCommand) -> HostCommand:
        """Enregistre une commande sous son nom."""
        with self._lock:
            self._commands[command.name] = command
            return command

    def unregister(self, name: str) -> bool:
        """Retire une commande."""
        with self._lock:
            return self._commands.pop(name, None) is not None

    def get(self, name: str) -> Optional[HostCommand]:
        """Recupere une commande par son nom."""
        with self._lock:
            return self._commands.get(name)

    def names(self) -> list[str]:
        """Noms des commandes enregistrees."""
        with self._lock:
            return sorted(self._commands)
