"""
Logging Infrastructure - Logging structure avec structlog.

Responsabilite:
---------------
Fournir un logging JSON structure pour production.

Usage:
------
    from autoserver.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("backup_deleted", filename="world-2024.vcdbs")
"""

from autoserver.infrastructure.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
