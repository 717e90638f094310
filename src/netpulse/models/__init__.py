"""
Traffic pipeline data models.
"""

from .packet import Event, Protocol, ThreatLevel, TCP_FLAGS
from .alert import ThreatAlert, AlertKind
from .interface import InterfaceRecord, InterfaceKind
from .stats import RunningStats

__all__ = [
    'Event',
    'Protocol',
    'ThreatLevel',
    'TCP_FLAGS',
    'ThreatAlert',
    'AlertKind',
    'InterfaceRecord',
    'InterfaceKind',
    'RunningStats',
]
