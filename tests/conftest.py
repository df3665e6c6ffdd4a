"""
Configuration et fixtures pytest.
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from autoserver.domain.entities.backup_artifact import BackupArtifact
from autoserver.infrastructure.adapters import (
    MemoryArtifactStore,
    MemoryCommandRegistry,
    MemoryHostCommand,
    MemoryNotificationSink,
)
from autoserver.infrastructure.backup.config import AutoServerSettings

NOW = datetime(2024, 6, 15, 12, 0, 0)


class FakeClock:
    """Horloge controlee par les tests."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def _aged(identity: str, now: datetime = NOW, **age) -> BackupArtifact:
    """Backup cree `age` avant `now` (hours=2, days=8...)."""
    return BackupArtifact(identity, now - timedelta(**age))


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def settings(tmp_path) -> AutoServerSettings:
    """Configuration isolee (pas de .env)."""
    return AutoServerSettings(
        _env_file=None,
        data_path=str(tmp_path),
        world_name="world.vcdbs",
    )


@pytest.fixture
def clock() -> FakeClock:
    """Horloge fixe, avancable."""
    return FakeClock()


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - ADAPTERS IN-MEMORY
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def save_command() -> MemoryHostCommand:
    """Commande /save qui reussit tout de suite."""
    return MemoryHostCommand("save")


@pytest.fixture
def genbackup_command() -> MemoryHostCommand:
    """Commande /genbackup qui reussit tout de suite."""
    return MemoryHostCommand("genbackup")


@pytest.fixture
def registry(save_command, genbackup_command) -> MemoryCommandRegistry:
    """Registre avec /save et /genbackup."""
    registry = MemoryCommandRegistry()
    registry.register(save_command)
    registry.register(genbackup_command)
    return registry


@pytest.fixture
def store() -> MemoryArtifactStore:
    """Stockage vide."""
    return MemoryArtifactStore()


@pytest.fixture
def notifier() -> MemoryNotificationSink:
    """Sink qui garde les messages."""
    return MemoryNotificationSink()


@pytest.fixture
def aged():
    """Fabrique de backups par age: aged("world-2h", hours=2)."""
    return _aged
