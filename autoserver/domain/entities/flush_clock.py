"""
FlushClock - Horloge du dernier /save confirme.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class FlushClock:
    """
    Date du dernier flush confirme.

    Possedee par l'orchestrateur. Sert a decider si le prochain
    cycle doit forcer un flush avant le backup.

    Attributes:
        last_flush_at: Date du dernier flush.
    """

    last_flush_at: datetime = field(default_factory=datetime.now)

    def minutes_since_flush(self, now: datetime) -> float:
        """Minutes ecoulees depuis le dernier flush."""
        return (now - self.last_flush_at).total_seconds() / 60

    def is_flush_due(self, now: datetime, threshold_minutes: float) -> bool:
        """True si le seuil est strictement depasse."""
        return self.minutes_since_flush(now) > threshold_minutes

    def mark_flushed(self, now: datetime) -> None:
        """Enregistre un flush."""
        self.last_flush_at = now
