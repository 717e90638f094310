"""
Capture interface table with synthetic throughput.
"""
import dataclasses
import logging
import random
import threading
from typing import Iterable, Optional, Tuple

from ..models.interface import InterfaceKind, InterfaceRecord

logger = logging.getLogger(__name__)

MIN_THROUGHPUT = 10
MAX_THROUGHPUT = 109


def default_interfaces() -> Tuple[InterfaceRecord, ...]:
    """The built-in interface table. Only eth0 starts enabled."""
    return (
        InterfaceRecord(
            interface_id='1',
            name='eth0',
            description='Intel(R) Ethernet Connection I217-LM',
            enabled=True,
            throughput_per_second=0,
            hardware_addr='00:1B:21:3C:4D:5E',
            network_addr='192.168.1.100',
            kind=InterfaceKind.ETHERNET,
        ),
        InterfaceRecord(
            interface_id='2',
            name='wlan0',
            description='Realtek RTL8822BE 802.11ac PCIe Adapter',
            enabled=False,
            throughput_per_second=0,
            hardware_addr='A4:B1:C2:D3:E4:F5',
            network_addr='192.168.1.101',
            kind=InterfaceKind.WIRELESS,
        ),
        InterfaceRecord(
            interface_id='3',
            name='lo',
            description='Software Loopback Interface',
            enabled=False,
            throughput_per_second=0,
            hardware_addr='00:00:00:00:00:00',
            network_addr='127.0.0.1',
            kind=InterfaceKind.LOOPBACK,
        ),
        InterfaceRecord(
            interface_id='4',
            name='vmnet1',
            description='VMware Virtual Ethernet Adapter (VMnet1)',
            enabled=False,
            throughput_per_second=0,
            hardware_addr='00:50:56:C0:00:01',
            network_addr='192.168.56.1',
            kind=InterfaceKind.VIRTUAL,
        ),
        InterfaceRecord(
            interface_id='5',
            name='bluetooth0',
            description='Bluetooth Device (Personal Area Network)',
            enabled=False,
            throughput_per_second=0,
            hardware_addr='B8:27:EB:A1:B2:C3',
            network_addr='169.254.1.1',
            kind=InterfaceKind.BLUETOOTH,
        ),
    )


class InterfaceRegistry:
    """Tracks which capture sources are enabled and what they report."""

    def __init__(self, interfaces: Optional[Iterable[InterfaceRecord]] = None,
                 rng: Optional[random.Random] = None):
        records = default_interfaces() if interfaces is None else tuple(interfaces)
        self._records = list(records)
        self._rng = rng or random.Random()
        self._lock = threading.RLock()

    def toggle(self, interface_id: str) -> None:
        """Flip one interface. Unknown ids are ignored."""
        with self._lock:
            for index, record in enumerate(self._records):
                if record.interface_id == interface_id:
                    self._records[index] = dataclasses.replace(record, enabled=not record.enabled)
                    logger.debug("Interface %s %s", record.name,
                                 "disabled" if record.enabled else "enabled")
                    return
        logger.debug("Ignoring toggle for unknown interface id %r", interface_id)

    def tick(self) -> None:
        with self._lock:
            self._records = [
                dataclasses.replace(
                    record,
                    throughput_per_second=(
                        self._rng.randint(MIN_THROUGHPUT, MAX_THROUGHPUT) if record.enabled else 0
                    ),
                )
                for record in self._records
            ]

    def get(self, interface_id: str) -> Optional[InterfaceRecord]:
        with self._lock:
            for record in self._records:
                if record.interface_id == interface_id:
                    return record
        return None

    def find_by_name(self, name: str) -> Optional[InterfaceRecord]:
        with self._lock:
            for record in self._records:
                if record.name == name:
                    return record
        return None

    def snapshot(self) -> Tuple[InterfaceRecord, ...]:
        with self._lock:
            return tuple(self._records)
