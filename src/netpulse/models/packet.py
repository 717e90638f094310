# Packet event data model
"""
Packet event models for NetPulse.

THESE MODELS ARE IMMUTABLE - the threat level of an event is decided when
it is generated and analysis only ever aggregates over it. All
transformations create new objects.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, FrozenSet

# Control flags in display order
TCP_FLAGS = ("SYN", "ACK", "PSH", "FIN")


class Protocol(str, Enum):
    TCP = "TCP"
    UDP = "UDP"
    HTTP = "HTTP"
    HTTPS = "HTTPS"
    DNS = "DNS"
    FTP = "FTP"
    SSH = "SSH"
    ICMP = "ICMP"


class ThreatLevel(IntEnum):
    """Ordinal severity shared by events and alerts."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "ThreatLevel":
        """Parse 'low' / 'medium' / 'high' / 'critical' (case-insensitive)."""
        return cls[label.strip().upper()]


@dataclass(frozen=True)  # IMMUTABLE
class Event:
    """
    One synthetic packet event.

    IMPORTANT: event_id strictly increases with generation order. This is
    enforced by the EventFactory, not by the model.
    """
    # CORE IDENTIFICATION
    event_id: int
    """Monotonic, process-unique integer"""

    timestamp_us: int
    """Capture instant, microseconds since Unix epoch"""

    # ADDRESSING
    source_addr: str
    dest_addr: str
    protocol: Protocol
    source_port: int
    dest_port: int

    # CONTENT
    size: int
    """Bytes on the wire"""

    flags: FrozenSet[str]
    """Subset of TCP_FLAGS. A frozenset so that flag order never matters."""

    payload_preview: str
    """Descriptive text only, never real payload bytes"""

    threat_level: ThreatLevel
    encrypted: bool

    def __post_init__(self):
        # Accept any iterable of flags but always store a frozenset
        if not isinstance(self.flags, frozenset):
            object.__setattr__(self, 'flags', frozenset(self.flags))

    @property
    def timestamp_seconds(self) -> float:
        return self.timestamp_us / 1_000_000.0

    @property
    def is_threat(self) -> bool:
        """True for high and critical events."""
        return self.threat_level >= ThreatLevel.HIGH

    @property
    def flag_names(self) -> tuple:
        """All flags: TCP_FLAGS in display order, then any others sorted."""
        known = tuple(flag for flag in TCP_FLAGS if flag in self.flags)
        return known + tuple(sorted(self.flags.difference(TCP_FLAGS)))

    def to_dict(self) -> Dict[str, Any]:
        """Field-for-field record used by the JSON export."""
        return {
            "event_id": self.event_id,
            "timestamp_us": self.timestamp_us,
            "source_addr": self.source_addr,
            "dest_addr": self.dest_addr,
            "protocol": self.protocol.value,
            "source_port": self.source_port,
            "dest_port": self.dest_port,
            "size": self.size,
            "flags": list(self.flag_names),
            "payload_preview": self.payload_preview,
            "threat_level": self.threat_level.label,
            "encrypted": self.encrypted,
        }

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Event":
        return cls(
            event_id=int(record["event_id"]),
            timestamp_us=int(record["timestamp_us"]),
            source_addr=record["source_addr"],
            dest_addr=record["dest_addr"],
            protocol=Protocol(record["protocol"]),
            source_port=int(record["source_port"]),
            dest_port=int(record["dest_port"]),
            size=int(record["size"]),
            flags=frozenset(record["flags"]),
            payload_preview=record["payload_preview"],
            threat_level=ThreatLevel.from_label(record["threat_level"]),
            encrypted=bool(record["encrypted"]),
        )
