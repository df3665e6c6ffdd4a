"""
Backup Config - Configuration des sauvegardes automatiques.

Responsabilite unique:
----------------------
Configurer les parametres de backup, de retention et de planification.

Variables (prefixe AUTOSERVER_):
--------------------------------
- AUTOSERVER_DATA_PATH: Repertoire de donnees de l'hote
- AUTOSERVER_BACKUP_FOLDER: Repertoire des backups (relatif a DATA_PATH)
- AUTOSERVER_WORLD_NAME: Monde actif, son nom filtre les backups
- AUTOSERVER_FLUSH_THRESHOLD_MINUTES: Delai avant un /save force
- AUTOSERVER_BACKUP_SHELL_COMMAND: Commande de backup pour la console
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class AutoServerSettings(BaseSettings):
    """
    Configuration des sauvegardes automatiques.

    Chargee depuis les variables d'environnement.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTOSERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Stockage local
    data_path: str = "."
    backup_folder: str = "Backups"
    world_name: str = "default.vcdbs"
    artifact_extension: str = ".vcdbs"

    # Commandes de l'hote
    flush_command_name: str = "save"
    backup_command_name: str = "genbackup"
    flush_shell_command: str = ""
    backup_shell_command: str = ""

    # Cycle
    flush_threshold_minutes: float = 30
    skip_overlapping_cycles: bool = False

    # Schedule (minutes)
    default_interval_minutes: int = 30
    boot_interval_minutes: int = 60

    # Retention
    keep_newest: int = 3

    # Logging
    json_logs: bool = False
    log_level: str = "INFO"

    @property
    def backup_path(self) -> Path:
        """Retourne le chemin de backup."""
        return Path(self.data_path) / self.backup_folder

    @property
    def world_prefix(self) -> str:
        """Nom du monde sans extension, prefixe des fichiers de backup."""
        return Path(self.world_name).stem


@lru_cache
def get_settings() -> AutoServerSettings:
    """Retourne la configuration (cached)."""
    return AutoServerSettings()
