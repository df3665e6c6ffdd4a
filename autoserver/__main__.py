"""
Point d'entree: hote console des backups automatiques.

Usage:
------
    AUTOSERVER_BACKUP_SHELL_COMMAND="./genbackup.sh" python -m autoserver

Comportement:
-------------
1. Configure le logging (structlog)
2. Cree le conteneur depuis les variables d'environnement
3. Demarre les backups toutes les boot_interval_minutes (60)
4. Lit les commandes /autoserver sur stdin jusqu'a quit ou Ctrl+C
"""

import sys

from autoserver.infrastructure.backup.config import get_settings
from autoserver.infrastructure.container import Container
from autoserver.infrastructure.logging import configure_logging, get_logger
from autoserver.presentation.console import run_console


def main() -> int:
    """Lance l'hote console."""
    settings = get_settings()
    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    logger = get_logger("autoserver")

    container = Container.create(settings)
    container.attach()
    logger.info(
        "autoserver_started",
        backup_path=str(settings.backup_path),
        world=settings.world_prefix,
        flush_command=settings.flush_shell_command or None,
        backup_command=settings.backup_shell_command or None,
    )

    try:
        run_console(container, sys.stdin)
    except KeyboardInterrupt:
        pass
    finally:
        container.detach()
        logger.info("autoserver_stopped")

    return 0


if __name__ == "__main__":
    sys.exit(main())
