"""CLI display and formatting utilities."""

from .formatters import (
    display_inventory,
    display_report,
    display_report_summary,
    display_section,
    format_finding,
)

__all__ = [
    "display_inventory",
    "display_report",
    "display_report_summary",
    "display_section",
    "format_finding",
]
