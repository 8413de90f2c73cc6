"""Command-line interface for the catalog reconciliation tool.

This is the main entry point that delegates to command modules.
"""

from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..utils.logging_config import setup_logging
from .commands import compare_command, inventory_command


@click.group()
@click.version_option(__version__)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set logging level",
)
@click.option("--log-file", type=click.Path(), help="Log to file")
def cli(log_level: str, log_file: Optional[str]) -> None:
    """Music Catalog Reconciliation Tool.

    Compares library exports (favourite albums, tracks and playlists) from
    several streaming services and reports what differs.
    """
    setup_logging(log_level=log_level, log_file=Path(log_file) if log_file else None)


# Register commands
cli.add_command(compare_command)
cli.add_command(inventory_command)


if __name__ == "__main__":
    cli()
