"""
CLI command for listing capture interfaces.
"""
import click

from ..capture.interfaces import InterfaceRegistry


@click.command()
def interfaces():
    """List the synthetic capture interfaces."""
    click.echo("Available interfaces:")
    for iface in InterfaceRegistry().snapshot():
        status = "UP" if iface.enabled else "DOWN"
        click.echo(f"  {iface.interface_id:3} {iface.name:12} {status:5} {iface.kind.value:10} "
                   f"{iface.network_addr:15} {iface.description}")
