"""
NetPulse CLI - main entry point.
"""
import logging

import click

from .capture import capture
from .interfaces import interfaces


@click.group()
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default='WARNING', show_default=True, help='Logging verbosity')
def cli(log_level: str):
    """NetPulse - synthetic traffic capture and threat analysis."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


cli.add_command(capture)
cli.add_command(interfaces)

if __name__ == "__main__":
    cli()
