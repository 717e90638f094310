"""
Capture session configuration.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class CaptureConfig:
    """Startup tunables for a capture session."""
    tick_interval_ms: int = 500
    capacity: int = 1000
    ddos_threshold: int = 50
    port_scan_threshold: int = 10
    min_batch: int = 1
    max_batch: int = 5
    seed: Optional[int] = None
    """Seed for the session RNG (None = nondeterministic)"""

    def __post_init__(self):
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {self.capacity}")
        if self.ddos_threshold < 0 or self.port_scan_threshold < 0:
            raise ValueError("thresholds must not be negative")
        if self.min_batch < 0 or self.max_batch < self.min_batch:
            raise ValueError(
                f"invalid batch bounds: min_batch={self.min_batch}, max_batch={self.max_batch}"
            )

    @property
    def tick_interval_seconds(self) -> float:
        return self.tick_interval_ms / 1000.0
