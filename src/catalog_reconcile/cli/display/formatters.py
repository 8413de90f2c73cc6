"""Display formatters for reconciliation reports."""

import logging
from typing import Dict, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.reconcile.findings import (
    Finding,
    MissingFrom,
    OrderDivergence,
    ReconciliationReport,
    SectionReport,
)
from ...models.models import Catalog

console = Console()
logger = logging.getLogger(__name__)


def format_finding(finding: Finding) -> str:
    """Format a single finding as plain text.

    Args:
        finding: Order divergence or missing item

    Returns:
        One-line description of the finding
    """
    if isinstance(finding, OrderDivergence):
        return (
            f"— [❌ {finding.other_source} / ✔️ {finding.reference_source}] "
            f"#{finding.position}: {finding.item.get_display_name()}"
        )
    return (
        f"— [➖ {finding.absent_source} / ➕ {finding.present_source}] "
        f"{finding.identifier} {finding.item.get_display_name()}"
    )


def display_section(section: SectionReport) -> None:
    """Display the findings of one section."""
    console.print()
    if section.skipped:
        console.print(
            f"[bold]Comparison of {escape(section.title)}[/bold] "
            f"[yellow]- Missing on {escape(section.skipped_on or '')}, "
            "skipping![/yellow]"
        )
        return

    console.print(f"[bold]Comparison of {escape(section.title)}[/bold]")
    if not section.findings:
        console.print("  [dim]✓ No differences[/dim]")
        return

    for finding in section.findings:
        style = "red" if isinstance(finding, OrderDivergence) else "yellow"
        console.print(f"[{style}]{escape(format_finding(finding))}[/{style}]")


def display_report(report: ReconciliationReport) -> None:
    """Display a full reconciliation report followed by its summary.

    Args:
        report: Report produced by CatalogReconciler
    """
    for section in report.sections:
        display_section(section)

    display_report_summary(report)


def display_report_summary(report: ReconciliationReport) -> None:
    """Display summary statistics of a report."""
    summary = report.get_summary()

    console.print("\n[bold cyan]📊 Summary[/bold cyan]")
    console.print(f"[dim]{escape(' / '.join(report.sources))} ({report.plan_name})[/dim]")

    table = Table(show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Sections Compared", str(summary["sections_compared"]))
    table.add_row("Order Divergences", str(summary["order_divergences"]))
    table.add_row("Missing Items", str(summary["missing_items"]))
    all_findings = [f for section in report.sections for f in section.findings]
    for source, count in count_by_source(all_findings).items():
        table.add_row(f"  Missing on {escape(source)}", str(count))
    if summary["playlists_skipped"] > 0:
        table.add_row(
            "Playlists Skipped", f"[yellow]{summary['playlists_skipped']}[/yellow]"
        )

    console.print(table)
    console.print()


def display_inventory(catalogs: Dict[str, Catalog]) -> None:
    """Display per-source entry counts."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Source", style="cyan")
    for column in ("Artists", "Albums", "Tracks", "Playlists", "Playlist Tracks"):
        table.add_column(column, style="green", justify="right")

    for source, catalog in catalogs.items():
        counts = catalog.summary()
        table.add_row(
            escape(source),
            str(counts["artists"]),
            str(counts["albums"]),
            str(counts["tracks"]),
            str(counts["playlists"]),
            str(counts["playlist_tracks"]),
        )

    console.print(table)


def count_by_source(findings: List[Finding]) -> Dict[str, int]:
    """Count missing items per absent source."""
    counts: Dict[str, int] = {}
    for finding in findings:
        if isinstance(finding, MissingFrom):
            counts[finding.absent_source] = counts.get(finding.absent_source, 0) + 1
    return counts
