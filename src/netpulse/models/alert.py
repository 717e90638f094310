"""Threat alert model."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .packet import ThreatLevel


class AlertKind(str, Enum):
    MALICIOUS_ACTIVITY = "Malicious Activity"
    SUSPICIOUS_BEHAVIOR = "Suspicious Behavior"
    POTENTIAL_DDOS = "Potential DDoS"
    PORT_SCANNING = "Port Scanning"


@dataclass(frozen=True)
class ThreatAlert:
    """
    A finding derived from the current view.

    Alerts are never stored; the threat engine rebuilds them on every pass.
    alert_id is stable for the same triggering cause across passes.
    """
    alert_id: str
    kind: AlertKind
    severity: ThreatLevel
    description: str
    source_addr: str
    observed_at_us: int
    occurrence_count: int

    def to_dict(self) -> dict:
        return {
            "alert_id": self.alert_id,
            "kind": self.kind.value,
            "severity": self.severity.label,
            "description": self.description,
            "source_addr": self.source_addr,
            "observed_at_us": self.observed_at_us,
            "occurrence_count": self.occurrence_count,
        }
