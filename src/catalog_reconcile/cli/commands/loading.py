"""Shared helpers for commands that read export files."""

import logging
from pathlib import Path
from typing import Dict, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from ...catalog import CatalogBuilder
from ...config import Config
from ...models.models import Catalog

console = Console()
logger = logging.getLogger(__name__)


def apply_overrides(
    config: Config,
    export_dir: Optional[str],
    sources: Sequence[str],
) -> None:
    """Apply CLI option overrides on top of environment configuration."""
    if export_dir:
        config.export_directory = Path(export_dir)
    if sources:
        config.sources = list(sources)


def load_catalogs(config: Config) -> Dict[str, Catalog]:
    """Build one catalog per configured source.

    Args:
        config: Application configuration

    Returns:
        Catalogs keyed by source name, in configured order

    Raises:
        CatalogBuildError: If an export file cannot be read
    """
    console.print("[cyan]Reading library exports...[/cyan]")
    builder = CatalogBuilder(encoding=config.csv_encoding)

    catalogs: Dict[str, Catalog] = {}
    for source in config.sources:
        catalog = builder.build(source, config.export_path(source))
        counts = catalog.summary()
        console.print(
            f"  [green]✓ {escape(source)}: {counts['albums']} albums, "
            f"{counts['tracks']} tracks, {counts['playlists']} playlists[/green]"
        )
        catalogs[source] = catalog

    return catalogs
