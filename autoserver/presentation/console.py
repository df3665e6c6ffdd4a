"""
Console de l'hote.

Lit les commandes ligne par ligne (stdin) et les route vers les
handlers enregistres. Une ligne peut commencer par un slash.

    autoserver start 15
    /autoserver stop
    help
    quit
"""

from typing import Iterable

from autoserver.infrastructure.container import Container
from autoserver.infrastructure.logging import get_logger
from autoserver.presentation.commands.autoserver_command import DESCRIPTION

logger = get_logger(__name__)

QUIT_WORDS = ("quit", "exit")


def run_console(container: Container, lines: Iterable[str]) -> int:
    """
    Traite les lignes jusqu'a quit ou fin de flux.

    Args:
        container: Conteneur attache.
        lines: Source des lignes (sys.stdin en production).

    Returns:
        Nombre de commandes /autoserver traitees.
    """
    handled = 0
    handler = container.command_handler

    for raw in lines:
        line = raw.strip().lstrip("/")
        if not line:
            continue

        name, _, args = line.partition(" ")
        name = name.lower()

        if name in QUIT_WORDS:
            break
        if name == "help":
            logger.info("help", command=handler.name, description=DESCRIPTION)
            continue
        if name != handler.name:
            logger.warning("unknown_command", command=name)
            continue

        handler.handle(args)
        handled += 1

    return handled
