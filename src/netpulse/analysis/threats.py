"""Threat correlation over an event view."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set, Tuple

from ..models.alert import AlertKind, ThreatAlert
from ..models.packet import Event, ThreatLevel

DEFAULT_DDOS_THRESHOLD = 50
DEFAULT_PORT_SCAN_THRESHOLD = 10


@dataclass
class _SourceActivity:
    event_count: int = 0
    dest_ports: Set[int] = field(default_factory=set)
    last_seen_us: int = 0


class ThreatEngine:
    """
    Scans a view for threat signatures and returns ranked alerts.

    Three independent rules run on every call:
      - per-event classification of high/critical events
      - volumetric: more than `ddos_threshold` events from one source
      - reconnaissance: more than `port_scan_threshold` distinct
        destination ports from one source

    Nothing is carried between calls.
    """

    def __init__(self, ddos_threshold: int = DEFAULT_DDOS_THRESHOLD,
                 port_scan_threshold: int = DEFAULT_PORT_SCAN_THRESHOLD):
        self.ddos_threshold = ddos_threshold
        self.port_scan_threshold = port_scan_threshold

    def analyze(self, view: Iterable[Event]) -> Tuple[ThreatAlert, ...]:
        classified: List[ThreatAlert] = []
        # dicts keep first-seen source order
        sources: Dict[str, _SourceActivity] = {}

        for event in view:
            activity = sources.get(event.source_addr)
            if activity is None:
                activity = _SourceActivity()
                sources[event.source_addr] = activity
            activity.event_count += 1
            activity.dest_ports.add(event.dest_port)
            activity.last_seen_us = max(activity.last_seen_us, event.timestamp_us)

            if event.is_threat:
                classified.append(self._classify(event))

        volumetric = [
            self._ddos_alert(addr, activity)
            for addr, activity in sources.items()
            if activity.event_count > self.ddos_threshold
        ]
        reconnaissance = [
            self._port_scan_alert(addr, activity)
            for addr, activity in sources.items()
            if len(activity.dest_ports) > self.port_scan_threshold
        ]

        # sorted() is stable, so ties keep rule order then first-seen order
        alerts = classified + volumetric + reconnaissance
        return tuple(sorted(alerts, key=lambda alert: -alert.severity))

    def _classify(self, event: Event) -> ThreatAlert:
        kind = (AlertKind.MALICIOUS_ACTIVITY if event.threat_level == ThreatLevel.CRITICAL
                else AlertKind.SUSPICIOUS_BEHAVIOR)
        return ThreatAlert(
            alert_id=f"threat_{event.event_id}",
            kind=kind,
            severity=event.threat_level,
            description=(
                f"{event.protocol.value} traffic from {event.source_addr} "
                f"shows {event.threat_level.label} risk patterns"
            ),
            source_addr=event.source_addr,
            observed_at_us=event.timestamp_us,
            occurrence_count=1,
        )

    def _ddos_alert(self, addr: str, activity: _SourceActivity) -> ThreatAlert:
        return ThreatAlert(
            alert_id=f"ddos_{addr}",
            kind=AlertKind.POTENTIAL_DDOS,
            severity=ThreatLevel.HIGH,
            description=f"Unusually high traffic volume from {addr} ({activity.event_count} packets)",
            source_addr=addr,
            observed_at_us=activity.last_seen_us,
            occurrence_count=activity.event_count,
        )

    def _port_scan_alert(self, addr: str, activity: _SourceActivity) -> ThreatAlert:
        port_count = len(activity.dest_ports)
        return ThreatAlert(
            alert_id=f"portscan_{addr}",
            kind=AlertKind.PORT_SCANNING,
            severity=ThreatLevel.MEDIUM,
            description=f"Port scanning detected from {addr} ({port_count} different ports)",
            source_addr=addr,
            observed_at_us=activity.last_seen_us,
            occurrence_count=port_count,
        )
