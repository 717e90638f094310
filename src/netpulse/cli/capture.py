"""
CLI command for synthetic live capture.
"""
import time
from typing import Optional, Tuple

import click

from ..capture.config import CaptureConfig
from ..capture.session import CaptureSession
from ..analysis.filtering import FilterSpec
from ..models.packet import Protocol, ThreatLevel
from .formatting import format_bytes, format_timestamp


@click.command()
@click.option('--duration', '-d', type=click.FloatRange(min=0, min_open=True),
              help='Duration in seconds (default: run until Ctrl+C)')
@click.option('--interval-ms', type=int, default=500, show_default=True, help='Tick interval in milliseconds')
@click.option('--capacity', type=int, default=1000, show_default=True, help='Event buffer capacity')
@click.option('--ddos-threshold', type=int, default=50, show_default=True,
              help='Events from one source before a DDoS alert')
@click.option('--port-scan-threshold', type=int, default=10, show_default=True,
              help='Distinct destination ports from one source before a port-scan alert')
@click.option('--seed', type=int, help='Seed the traffic generator for repeatable runs')
@click.option('--src', 'source_addr', help='Source address contains')
@click.option('--dst', 'dest_addr', help='Destination address contains')
@click.option('--protocol', type=click.Choice(['all'] + [p.value for p in Protocol]), default='all',
              show_default=True, help='Protocol to keep')
@click.option('--port', help='Source or destination port')
@click.option('--threat-level', type=click.Choice(['all'] + [level.label for level in ThreatLevel]),
              default='all', show_default=True, help='Threat level to keep')
@click.option('--toggle', 'toggles', multiple=True, help='Interface name or id to toggle (repeatable)')
@click.option('--alerts', 'max_alerts', type=int, default=10, show_default=True,
              help='Max threat alerts to print in the summary')
@click.option('--export-dir', type=click.Path(file_okay=False),
              help='Write the filtered view as packets_<date>.json into this directory')
def capture(duration: Optional[float], interval_ms: int, capacity: int, ddos_threshold: int,
            port_scan_threshold: int, seed: Optional[int], source_addr: Optional[str],
            dest_addr: Optional[str], protocol: str, port: Optional[str], threat_level: str,
            toggles: Tuple[str, ...], max_alerts: int, export_dir: Optional[str]):
    """
    Run a synthetic capture session.

    Examples:
      netpulse capture -d 10
      netpulse capture -d 30 --protocol HTTPS --threat-level critical --export-dir .
    """
    try:
        config = CaptureConfig(
            tick_interval_ms=interval_ms,
            capacity=capacity,
            ddos_threshold=ddos_threshold,
            port_scan_threshold=port_scan_threshold,
            seed=seed,
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    session = CaptureSession(config)
    session.set_filter(FilterSpec(
        source_addr=source_addr,
        dest_addr=dest_addr,
        protocol=protocol,
        port=port,
        threat_level=threat_level,
    ))

    for name in toggles:
        record = session.interfaces.find_by_name(name) or session.interfaces.get(name)
        if record is None:
            click.echo(f"Unknown interface '{name}', ignoring", err=True)
            continue
        session.toggle_interface(record.interface_id)

    session.start()
    click.echo(f"Capture started (interval: {interval_ms}ms, capacity: {capacity})")
    if duration is not None:
        click.echo(f"Duration: {duration:g} seconds")
    click.echo("Press Ctrl+C to stop\n")

    click.echo(f"{'Time':6} {'Ev/tick':8} {'Total':10} {'Buffered':9} {'Threats':8}")
    click.echo("-" * 45)

    start_time = time.time()
    last_display = start_time

    try:
        while True:
            if duration is not None and (time.time() - start_time) >= duration:
                click.echo(f"\nDuration reached ({duration:g}s), stopping...")
                break

            current_time = time.time()
            if current_time - last_display >= 0.5:
                snapshot = session.current_snapshot()
                stats = snapshot.stats
                elapsed = current_time - start_time
                click.echo(f"\r{elapsed:5.1f}s {stats.current_rate:8} {stats.total_events:10} "
                           f"{len(snapshot.events):9} {stats.threat_count:8}",
                           nl=False)
                last_display = current_time

            time.sleep(0.05)

    except KeyboardInterrupt:
        click.echo("\n\nStopping capture...")
    finally:
        session.stop()

    _print_summary(session, time.time() - start_time, max_alerts)

    if export_dir:
        document = session.export_filtered_view()
        try:
            path = document.write(export_dir)
        except OSError as e:
            # The session is untouched; report and carry on
            click.echo(f"Export failed: {e}", err=True)
        else:
            click.echo(f"\nExported {document.record_count} events to {path}")


def _print_summary(session: CaptureSession, elapsed: float, max_alerts: int) -> None:
    snapshot = session.current_snapshot()
    stats = snapshot.stats
    view = session.filtered_view()
    alerts = session.threat_alerts()
    summary = session.threat_summary()
    traffic = session.traffic_breakdown()

    click.echo("\n" + "=" * 50)
    click.echo("CAPTURE SUMMARY")
    click.echo("=" * 50)
    click.echo(f"Duration:        {elapsed:.2f}s")
    click.echo(f"Total Events:    {stats.total_events:,}")
    click.echo(f"Total Bytes:     {format_bytes(stats.total_bytes)}")
    click.echo(f"Threat Events:   {stats.threat_count:,}")
    click.echo(f"Connections:     {stats.active_connections}")
    click.echo(f"Buffered:        {len(snapshot.events)}")
    click.echo(f"Filtered View:   {len(view)}")

    click.echo("\nInterfaces:")
    for iface in snapshot.interfaces:
        status = "UP" if iface.enabled else "DOWN"
        click.echo(f"  {iface.name:12} {status:5} {iface.throughput_per_second:5} pkt/s")

    click.echo("\nProtocols:")
    for label, count in traffic.protocols:
        click.echo(f"  {label:8} {count}")

    click.echo("\nTop Sources:")
    for addr, count in traffic.top_sources:
        click.echo(f"  {addr:18} {count} packets")

    click.echo(f"\nThreat Alerts: {summary.total} "
               f"(critical {summary.critical}, high {summary.high}, "
               f"medium {summary.medium}, low {summary.low}; "
               f"{summary.encrypted} encrypted events)")
    if not alerts:
        click.echo("  No active threats")
        return
    for alert in alerts[:max_alerts]:
        click.echo(f"  [{alert.severity.label.upper():8}] {format_timestamp(alert.observed_at_us)} "
                   f"{alert.kind.value:20} {alert.description}")
    if len(alerts) > max_alerts:
        click.echo(f"  ... {len(alerts) - max_alerts} more")
