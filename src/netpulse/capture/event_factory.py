"""
Synthetic packet event generator.
"""
import itertools
import random
import string
import threading
import time
from typing import Callable, List, Optional

from ..models.packet import Event, Protocol, ThreatLevel, TCP_FLAGS

COMMON_PORTS = (80, 443, 22, 21, 53, 25, 110, 143, 993, 995, 8080, 3389)

# 3 of 6 buckets are low
THREAT_BUCKETS = (
    ThreatLevel.LOW,
    ThreatLevel.LOW,
    ThreatLevel.LOW,
    ThreatLevel.MEDIUM,
    ThreatLevel.HIGH,
    ThreatLevel.CRITICAL,
)

FLAG_PROBABILITY = 0.3
ENCRYPTION_PROBABILITY = 0.2
ALWAYS_ENCRYPTED = (Protocol.HTTPS, Protocol.SSH)

MIN_SIZE = 64
MAX_SIZE = 1563

# Event ids are unique across every factory in the process
_id_lock = threading.Lock()
_id_counter = itertools.count(1)


def next_event_id() -> int:
    with _id_lock:
        return next(_id_counter)


def _private_192(rng: random.Random) -> str:
    return f"192.168.{rng.randrange(255)}.{rng.randrange(255)}"


def _private_10(rng: random.Random) -> str:
    return f"10.{rng.randrange(255)}.{rng.randrange(255)}.{rng.randrange(255)}"


def _private_172(rng: random.Random) -> str:
    return f"172.{16 + rng.randrange(16)}.{rng.randrange(255)}.{rng.randrange(255)}"


def _google_dns(rng: random.Random) -> str:
    return f"8.8.{rng.randrange(10)}.{rng.randrange(255)}"


def _cloudflare(rng: random.Random) -> str:
    return f"1.1.1.{rng.randrange(255)}"


ADDRESS_RANGES = (_private_192, _private_10, _private_172, _google_dns, _cloudflare)


class EventFactory:
    """
    Generates synthetic packet events with plausible field distributions.

    Fields are drawn independently on every call. Ports come from a small
    fixed set so the same port recurs across many events, which is what
    gives the volumetric and port-scan rules something to find.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.time):
        self._rng = rng or random.Random()
        self._clock = clock

    def generate(self) -> Event:
        rng = self._rng
        protocol = rng.choice(list(Protocol))
        encrypted = protocol in ALWAYS_ENCRYPTED or rng.random() < ENCRYPTION_PROBABILITY
        token = "".join(rng.choice(string.ascii_lowercase + string.digits) for _ in range(6))

        return Event(
            event_id=next_event_id(),
            timestamp_us=int(self._clock() * 1_000_000),
            source_addr=self._address(),
            dest_addr=self._address(),
            protocol=protocol,
            source_port=rng.choice(COMMON_PORTS),
            dest_port=rng.choice(COMMON_PORTS),
            size=rng.randint(MIN_SIZE, MAX_SIZE),
            flags=frozenset(flag for flag in TCP_FLAGS if rng.random() < FLAG_PROBABILITY),
            payload_preview=f"{protocol.value} packet data - {token}",
            threat_level=rng.choice(THREAT_BUCKETS),
            encrypted=encrypted,
        )

    def generate_batch(self, n: int) -> List[Event]:
        """Generate n events in id order."""
        return [self.generate() for _ in range(n)]

    def _address(self) -> str:
        return self._rng.choice(ADDRESS_RANGES)(self._rng)
