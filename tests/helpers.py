from netpulse.models.packet import Event, Protocol, ThreatLevel


def make_event(event_id=1, source_addr="10.0.0.1", dest_addr="10.0.0.2",
               protocol=Protocol.TCP, source_port=12345, dest_port=443,
               size=100, flags=("SYN",), threat_level=ThreatLevel.LOW,
               encrypted=False, timestamp_us=None):
    return Event(
        event_id=event_id,
        timestamp_us=timestamp_us if timestamp_us is not None else 1_700_000_000_000_000 + event_id,
        source_addr=source_addr,
        dest_addr=dest_addr,
        protocol=protocol,
        source_port=source_port,
        dest_port=dest_port,
        size=size,
        flags=frozenset(flags),
        payload_preview=f"{protocol.value} packet data - test{event_id}",
        threat_level=threat_level,
        encrypted=encrypted,
    )
