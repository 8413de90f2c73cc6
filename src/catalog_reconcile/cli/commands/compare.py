"""Compare command reconciling library exports across services."""

import logging
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from ...catalog import apply_remap_table, load_remap_table
from ...config import Config
from ...core.reconcile.engine import SECTION_NAMES, CatalogReconciler
from ...core.reconcile.plan import available_plans, build_plan
from ...exceptions import CatalogReconcileError
from ..display import display_report
from .loading import apply_overrides, load_catalogs

console = Console()
logger = logging.getLogger(__name__)


@click.command("compare")
@click.option(
    "--export-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory holding the CSV exports (defaults to config)",
)
@click.option(
    "--source",
    "sources",
    multiple=True,
    help="Source name, reference first (repeatable, defaults to config)",
)
@click.option(
    "--plan",
    type=click.Choice(available_plans()),
    help="Comparison plan (defaults to config)",
)
@click.option(
    "--remap-file",
    type=click.Path(dir_okay=False),
    help="JSON remap table applied before comparing",
)
@click.option("--playlist", "-p", help="Only compare this playlist")
@click.option(
    "--section",
    "sections",
    multiple=True,
    type=click.Choice(SECTION_NAMES),
    help="Only compare these sections (repeatable)",
)
@click.option(
    "--fail-on-findings",
    is_flag=True,
    help="Exit with status 1 when any discrepancy is found",
)
def compare_command(
    export_dir: Optional[str],
    sources: Tuple[str, ...],
    plan: Optional[str],
    remap_file: Optional[str],
    playlist: Optional[str],
    sections: Tuple[str, ...],
    fail_on_findings: bool,
) -> None:
    """Compare favourite albums, tracks and playlists across services.

    Reports items missing on one service and the first position at which a
    service leaves the reference service's order.

    Examples:
        catalog-reconcile compare
        catalog-reconcile compare --source Spotify --source TIDAL --plan two-source
        catalog-reconcile compare --remap-file remaps.json --section albums
        catalog-reconcile compare --playlist "Road Trip"
    """
    try:
        config = Config()
        apply_overrides(config, export_dir, sources)
        if plan:
            config.plan = plan
        if remap_file:
            config.remap_file = Path(remap_file)

        comparison_plan = build_plan(config.plan, config.sources)
        catalogs = load_catalogs(config)

        if config.remap_file:
            overrides = load_remap_table(config.remap_file)
            apply_remap_table(catalogs, overrides)
            console.print(f"  [green]✓ Applied {len(overrides)} remap(s)[/green]")

        reconciler = CatalogReconciler(comparison_plan)
        report = reconciler.reconcile(
            catalogs, playlist=playlist, sections=sections or None
        )
    except CatalogReconcileError as e:
        logger.error("Compare command failed: %s", e)
        console.print(f"\n[red]✗ Compare failed: {escape(str(e))}[/red]\n")
        raise click.ClickException(str(e))

    display_report(report)

    if fail_on_findings and report.has_findings:
        click.get_current_context().exit(1)
