"""
Bounded FIFO store of recent events.
"""
import threading
from collections import deque
from typing import Iterable, Tuple

from ..models.packet import Event


class EventBuffer:
    """
    Capacity-bounded, insertion-ordered event store.

    The buffer always holds the most recent `capacity` events in arrival
    order. append() and clear() are the only mutators; readers get a tuple
    copy from snapshot() so they never see a half-applied append.
    """

    def __init__(self, capacity: int = 1000):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._events = deque()
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, batch: Iterable[Event]) -> int:
        """Append a batch in order, evict oldest events. Returns evicted count."""
        with self._lock:
            self._events.extend(batch)
            evicted = 0
            while len(self._events) > self._capacity:
                self._events.popleft()
                evicted += 1
            return evicted

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def snapshot(self) -> Tuple[Event, ...]:
        with self._lock:
            return tuple(self._events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
