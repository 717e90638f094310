"""
Streaming capture counters.
"""
import random
import threading
from typing import Optional, Sequence

from ..models.packet import Event
from ..models.stats import RunningStats

MIN_CONNECTIONS = 10
MAX_CONNECTIONS = 59


class StatsAggregator:
    """
    Maintains RunningStats from appended batches.

    on_append() must see exactly the batches given to EventBuffer.append,
    once each. It only looks at the batch, never the buffer, so eviction
    has no effect on the totals.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._stats = RunningStats()
        self._lock = threading.Lock()

    @property
    def stats(self) -> RunningStats:
        with self._lock:
            return self._stats

    def on_append(self, batch: Sequence[Event]) -> RunningStats:
        with self._lock:
            current = self._stats
            self._stats = RunningStats(
                total_events=current.total_events + len(batch),
                current_rate=len(batch),
                total_bytes=current.total_bytes + sum(event.size for event in batch),
                threat_count=current.threat_count + sum(1 for event in batch if event.is_threat),
                active_connections=self._rng.randint(MIN_CONNECTIONS, MAX_CONNECTIONS),
            )
            return self._stats

    def reset(self) -> None:
        with self._lock:
            self._stats = RunningStats()
