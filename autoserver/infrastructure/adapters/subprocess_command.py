"""
SubprocessHostCommand - Commande de l'hote executee par le shell.

Responsabilite unique:
----------------------
Executer une commande shell (script de save, de backup...) dans un
pool de threads et signaler sa fin par callback.
"""

import subprocess
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from autoserver.application.ports.host_commands import (
    CommandCallback,
    CommandResult,
    HostCommand,
)
from autoserver.infrastructure.logging import get_logger

logger = get_logger(__name__)


class SubprocessHostCommand(HostCommand):
    """
    Commande de l'hote lancee via subprocess.

    execute() rend la main tout de suite; le callback est appele
    depuis un thread du pool quand le processus se termine.
    """

    def __init__(
        self,
        name: str,
        shell_command: str,
        executor: ThreadPoolExecutor,
        timeout_seconds: Optional[float] = 3600,
    ):
        """
        Initialise la commande.

        Args:
            name: Nom de la commande.
            shell_command: Ligne de commande executee par le shell.
            executor: Pool partage entre les commandes.
            timeout_seconds: Duree max avant echec.
        """
        self.name = name
        self._shell_command = shell_command
        self._executor = executor
        self._timeout = timeout_seconds

    def execute(self, on_complete: CommandCallback) -> None:
        """Soumet la commande au pool."""
        future = self._executor.submit(self._run)
        future.add_done_callback(lambda f: on_complete(self._to_result(f)))

    def _run(self) -> CommandResult:
        logger.info("host_command_started", command=self.name)
        try:
            process = subprocess.run(
                self._shell_command,
                shell=True,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            return CommandResult.error(f"/{self.name} timed out after {self._timeout}s")

        if process.returncode != 0:
            error = (process.stderr or process.stdout or "").strip()
            return CommandResult.error(error or f"/{self.name} exited with {process.returncode}")

        return CommandResult.ok(process.stdout.strip())

    def _to_result(self, future: Future) -> CommandResult:
        error = future.exception()
        if error is not None:
            return CommandResult.error(str(error))
        return future.result()
