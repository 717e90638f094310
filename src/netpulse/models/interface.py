"""Capture interface model."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InterfaceKind(str, Enum):
    ETHERNET = "Ethernet"
    WIRELESS = "Wireless"
    BLUETOOTH = "Bluetooth"
    VIRTUAL = "Virtual"
    LOOPBACK = "Loopback"
    OTHER = "Other"


@dataclass(frozen=True)
class InterfaceRecord:
    interface_id: str
    name: str
    description: str
    enabled: bool
    throughput_per_second: int
    hardware_addr: str
    network_addr: str
    kind: InterfaceKind = InterfaceKind.OTHER

    def to_dict(self) -> dict:
        return {
            "id": self.interface_id,
            "name": self.name,
            "description": self.description,
            "enabled": self.enabled,
            "throughput_per_second": self.throughput_per_second,
            "mac": self.hardware_addr,
            "ip": self.network_addr,
            "link_type": self.kind.value,
        }
