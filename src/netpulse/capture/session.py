"""
Capture session: owns the pipeline state and the clock that drives it.

Tick order: generate batch -> append to buffer -> update stats ->
refresh interfaces. The last three steps run under the session lock, so a
reader sees either all of a tick or none of it.
"""
import logging
import random
import threading
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..analysis.breakdown import ThreatSummary, TrafficBreakdown, breakdown, summarize_threats
from ..analysis.filtering import FilterEngine, FilterSpec
from ..analysis.stats import StatsAggregator
from ..analysis.threats import ThreatEngine
from ..export.json_export import ExportDocument, build_export
from ..models.alert import ThreatAlert
from ..models.interface import InterfaceRecord
from ..models.packet import Event
from ..models.stats import RunningStats
from .config import CaptureConfig
from .event_buffer import EventBuffer
from .event_factory import EventFactory
from .interfaces import InterfaceRegistry
from .scheduler import CaptureClock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Consistent point-in-time read of a session."""
    events: Tuple[Event, ...]
    """Buffered events, most recent last"""
    stats: RunningStats
    interfaces: Tuple[InterfaceRecord, ...]


class CaptureSession:
    """
    One monitoring session.

    All pipeline state lives here and is handed to the components
    explicitly; nothing is shared between sessions except the event id
    counter.
    """

    def __init__(self, config: Optional[CaptureConfig] = None,
                 factory: Optional[EventFactory] = None,
                 interfaces: Optional[InterfaceRegistry] = None):
        self.config = config or CaptureConfig()
        self._rng = random.Random(self.config.seed)
        self._lock = threading.RLock()
        # Serializes start/stop so the flag and the clock always agree
        self._lifecycle_lock = threading.Lock()

        self.factory = factory or EventFactory(rng=self._rng)
        self.buffer = EventBuffer(self.config.capacity)
        self.aggregator = StatsAggregator(rng=self._rng)
        self.interfaces = interfaces or InterfaceRegistry(rng=self._rng)
        self.filter_engine = FilterEngine()
        self.threat_engine = ThreatEngine(
            ddos_threshold=self.config.ddos_threshold,
            port_scan_threshold=self.config.port_scan_threshold,
        )
        self._filter_spec = FilterSpec()
        self._capturing = False
        self._clock = CaptureClock(self.config.tick_interval_seconds, self.tick)

    # LIFECYCLE

    @property
    def is_capturing(self) -> bool:
        with self._lock:
            return self._capturing

    def start(self) -> None:
        with self._lifecycle_lock:
            with self._lock:
                if self._capturing:
                    return
                self._capturing = True
            self._clock.start()
        logger.info("Capture started (interval=%dms, capacity=%d)",
                    self.config.tick_interval_ms, self.config.capacity)

    def stop(self) -> None:
        with self._lifecycle_lock:
            with self._lock:
                if not self._capturing:
                    return
                self._capturing = False
            # Outside the state lock: an in-flight tick needs it to finish
            self._clock.stop()
        logger.info("Capture stopped")

    def clear(self) -> None:
        """Empty the buffer and zero the counters together."""
        with self._lock:
            self.buffer.clear()
            self.aggregator.reset()
        logger.info("Capture buffer cleared")

    def close(self) -> None:
        self.stop()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # PIPELINE

    def tick(self) -> RunningStats:
        """Run one generation step. Called by the clock; safe to call directly."""
        with self._lock:
            size = self._rng.randint(self.config.min_batch, self.config.max_batch)
        batch = self.factory.generate_batch(size)

        with self._lock:
            evicted = self.buffer.append(batch)
            stats = self.aggregator.on_append(batch)
            self.interfaces.tick()

        if evicted:
            logger.debug("Evicted %d events (capacity=%d)", evicted, self.buffer.capacity)
        return stats

    # READS

    def current_snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                events=self.buffer.snapshot(),
                stats=self.aggregator.stats,
                interfaces=self.interfaces.snapshot(),
            )

    @property
    def filter_spec(self) -> FilterSpec:
        with self._lock:
            return self._filter_spec

    def set_filter(self, spec: Optional[FilterSpec]) -> None:
        with self._lock:
            self._filter_spec = spec or FilterSpec()

    def filtered_view(self) -> Tuple[Event, ...]:
        with self._lock:
            events = self.buffer.snapshot()
            spec = self._filter_spec
        return self.filter_engine.apply(events, spec)

    def threat_alerts(self) -> Tuple[ThreatAlert, ...]:
        return self.threat_engine.analyze(self.filtered_view())

    def threat_summary(self) -> ThreatSummary:
        view = self.filtered_view()
        return summarize_threats(self.threat_engine.analyze(view), view)

    def traffic_breakdown(self, limit: int = 10) -> TrafficBreakdown:
        return breakdown(self.filtered_view(), limit)

    # CONTROLS

    def toggle_interface(self, interface_id: str) -> None:
        with self._lock:
            self.interfaces.toggle(interface_id)

    def export_filtered_view(self, day: Optional[date] = None) -> ExportDocument:
        return build_export(self.filtered_view(), day)
