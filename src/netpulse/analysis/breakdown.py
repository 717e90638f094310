"""Traffic and threat breakdowns for the dashboard summary panels."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ..models.alert import ThreatAlert
from ..models.packet import Event, ThreatLevel


@dataclass(frozen=True)
class ThreatSummary:
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    encrypted: int = 0
    total: int = 0

    def to_dict(self) -> dict:
        return {
            "critical": self.critical,
            "high": self.high,
            "medium": self.medium,
            "low": self.low,
            "encrypted": self.encrypted,
            "total": self.total,
        }


@dataclass(frozen=True)
class TrafficBreakdown:
    protocols: Tuple[Tuple[str, int], ...]
    threat_levels: Tuple[Tuple[str, int], ...]
    top_sources: Tuple[Tuple[str, int], ...]


def summarize_threats(alerts: Sequence[ThreatAlert], view: Iterable[Event]) -> ThreatSummary:
    """Alert counts per severity plus the number of encrypted events in the view."""
    severities = Counter(alert.severity for alert in alerts)
    return ThreatSummary(
        critical=severities[ThreatLevel.CRITICAL],
        high=severities[ThreatLevel.HIGH],
        medium=severities[ThreatLevel.MEDIUM],
        low=severities[ThreatLevel.LOW],
        encrypted=sum(1 for event in view if event.encrypted),
        total=len(alerts),
    )


def protocol_mix(view: Iterable[Event]) -> Tuple[Tuple[str, int], ...]:
    """Events per protocol, in first-seen order. Protocols with no events are omitted."""
    counts = Counter()
    order = []
    for event in view:
        if event.protocol not in counts:
            order.append(event.protocol)
        counts[event.protocol] += 1
    return tuple((protocol.value, counts[protocol]) for protocol in order)


def threat_level_mix(view: Iterable[Event]) -> Tuple[Tuple[str, int], ...]:
    """Events per threat level, low to critical, including zero counts."""
    counts = Counter(event.threat_level for event in view)
    return tuple((level.label, counts[level]) for level in ThreatLevel)


def top_sources(view: Iterable[Event], limit: int = 10) -> Tuple[Tuple[str, int], ...]:
    """Most active source addresses. Ties keep first-seen order."""
    # Counter preserves insertion order and most_common() is a stable sort
    counts = Counter(event.source_addr for event in view)
    return tuple(counts.most_common(limit))


def breakdown(view: Sequence[Event], limit: int = 10) -> TrafficBreakdown:
    return TrafficBreakdown(
        protocols=protocol_mix(view),
        threat_levels=threat_level_mix(view),
        top_sources=top_sources(view, limit),
    )

