"""Inventory command listing what each export contains."""

import logging
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from ...config import Config
from ...exceptions import CatalogReconcileError
from ..display import display_inventory
from .loading import apply_overrides, load_catalogs

console = Console()
logger = logging.getLogger(__name__)


@click.command("inventory")
@click.option(
    "--export-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory holding the CSV exports (defaults to config)",
)
@click.option(
    "--source",
    "sources",
    multiple=True,
    help="Source name (repeatable, defaults to config)",
)
def inventory_command(export_dir: Optional[str], sources: Tuple[str, ...]) -> None:
    """Show per-service counts of artists, albums, tracks and playlists."""
    try:
        config = Config()
        apply_overrides(config, export_dir, sources)
        catalogs = load_catalogs(config)
    except CatalogReconcileError as e:
        logger.error("Inventory command failed: %s", e)
        console.print(f"\n[red]✗ Inventory failed: {escape(str(e))}[/red]\n")
        raise click.ClickException(str(e))

    console.print()
    display_inventory(catalogs)
