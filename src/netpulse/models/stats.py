"""Running capture statistics."""
from dataclasses import dataclass


@dataclass(frozen=True)
class RunningStats:
    """
    All-time counters for a capture session.

    total_events, total_bytes and threat_count count every arrival, so
    they keep growing after the buffer starts evicting old events.
    """
    total_events: int = 0
    current_rate: int = 0
    """Events in the most recent tick"""
    total_bytes: int = 0
    threat_count: int = 0
    """High and critical events ever seen"""
    active_connections: int = 0
    """Synthetic gauge"""

    def to_dict(self) -> dict:
        return {
            "total_events": self.total_events,
            "current_rate": self.current_rate,
            "total_bytes": self.total_bytes,
            "threat_count": self.threat_count,
            "active_connections": self.active_connections,
        }
