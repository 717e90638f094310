"""
Multi-field event filtering.

Filtering is lenient: a field that cannot be interpreted (a non-numeric
port, an unknown protocol name) places no constraint on the view instead
of raising.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple, Union

from ..models.packet import Event, Protocol, ThreatLevel

logger = logging.getLogger(__name__)

ALL = "all"

EventPredicate = Callable[[Event], bool]


@dataclass(frozen=True)
class FilterSpec:
    """User-selected predicates. Every present predicate must hold."""
    source_addr: Optional[str] = None
    dest_addr: Optional[str] = None
    protocol: Union[str, Protocol] = ALL
    port: Union[str, int, None] = None
    threat_level: Union[str, ThreatLevel] = ALL

    @property
    def is_empty(self) -> bool:
        return not _compile_parts(self)


def parse_port(value: Union[str, int, None]) -> Optional[int]:
    """Return the port as an int, or None when absent or malformed."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        logger.debug("Ignoring unparsable port filter %r", value)
        return None


def parse_protocol(value: Union[str, Protocol, None]) -> Optional[Protocol]:
    if value is None or isinstance(value, Protocol):
        return value
    text = str(value).strip()
    if not text or text == ALL:
        return None
    try:
        return Protocol(text.upper())
    except ValueError:
        logger.debug("Ignoring unknown protocol filter %r", value)
        return None


def parse_threat_level(value: Union[str, ThreatLevel, None]) -> Optional[ThreatLevel]:
    if value is None or isinstance(value, ThreatLevel):
        return value
    text = str(value).strip()
    if not text or text == ALL:
        return None
    try:
        return ThreatLevel.from_label(text)
    except KeyError:
        logger.debug("Ignoring unknown threat level filter %r", value)
        return None


def _compile_parts(spec: FilterSpec) -> List[EventPredicate]:
    parts: List[EventPredicate] = []

    if spec.source_addr:
        source = spec.source_addr
        parts.append(lambda e: source in e.source_addr)
    if spec.dest_addr:
        dest = spec.dest_addr
        parts.append(lambda e: dest in e.dest_addr)

    protocol = parse_protocol(spec.protocol)
    if protocol is not None:
        parts.append(lambda e: e.protocol == protocol)

    port = parse_port(spec.port)
    if port is not None:
        parts.append(lambda e: e.source_port == port or e.dest_port == port)

    level = parse_threat_level(spec.threat_level)
    if level is not None:
        parts.append(lambda e: e.threat_level == level)

    return parts


def compile_filter(spec: FilterSpec) -> EventPredicate:
    """Compile a FilterSpec into a single-event predicate."""
    parts = _compile_parts(spec)
    if not parts:
        return lambda e: True
    return lambda e: all(part(e) for part in parts)


class FilterEngine:
    """Derives an ordered view of the buffer from a FilterSpec."""

    def apply(self, view: Iterable[Event], spec: FilterSpec) -> Tuple[Event, ...]:
        predicate = compile_filter(spec)
        return tuple(event for event in view if predicate(event))
