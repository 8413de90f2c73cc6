"""Reconciliation results.

Findings carry no behavior: the engine produces them and the CLI display
renders them.
"""

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from enum import Enum
from typing import Dict, List, Optional, Union

from ...models.models import Album, Artist, Track

Item = Union[Album, Track, Artist]


class SectionKind(str, Enum):
    """Catalog section a report covers."""

    ARTISTS = "artists"
    ALBUMS = "albums"
    TRACKS = "tracks"
    PLAYLIST = "playlist"


@dataclass(frozen=True)
class OrderDivergence:
    """``other_source`` leaves ``reference_source``'s order at ``position``."""

    position: int
    other_source: str
    reference_source: str
    item: Item


@dataclass(frozen=True)
class MissingFrom:
    """``identifier`` exists on ``present_source`` but not ``absent_source``."""

    absent_source: str
    present_source: str
    identifier: str
    item: Item


Finding = Union[OrderDivergence, MissingFrom]


@dataclass
class SectionReport:
    """Findings for one catalog section (or one shared playlist)."""

    kind: SectionKind
    name: Optional[str] = None
    findings: List[Finding] = dataclass_field(default_factory=list)
    skipped_on: Optional[str] = None

    @property
    def title(self) -> str:
        """Get a human readable section title."""
        if self.kind == SectionKind.PLAYLIST:
            return f"Playlist: {self.name}"
        return {
            SectionKind.ARTISTS: "Favourite Artists",
            SectionKind.ALBUMS: "Favourite Albums",
            SectionKind.TRACKS: "Favourite Tracks",
        }[self.kind]

    @property
    def skipped(self) -> bool:
        """Whether the section was not compared."""
        return self.skipped_on is not None

    @property
    def divergences(self) -> List[OrderDivergence]:
        """Get order findings of this section."""
        return [f for f in self.findings if isinstance(f, OrderDivergence)]

    @property
    def missing(self) -> List[MissingFrom]:
        """Get membership findings of this section."""
        return [f for f in self.findings if isinstance(f, MissingFrom)]


@dataclass
class ReconciliationReport:
    """Result of reconciling all catalogs under one plan."""

    plan_name: str
    sources: List[str]
    sections: List[SectionReport] = dataclass_field(default_factory=list)

    def add_section(self, section: SectionReport) -> None:
        """Add a section report."""
        self.sections.append(section)

    @property
    def has_findings(self) -> bool:
        """Whether any section reported a discrepancy."""
        return any(section.findings for section in self.sections)

    def get_summary(self) -> Dict[str, int]:
        """Get summary statistics."""
        compared = [s for s in self.sections if not s.skipped]
        return {
            "sections_compared": len(compared),
            "playlists_skipped": sum(1 for s in self.sections if s.skipped),
            "order_divergences": sum(len(s.divergences) for s in compared),
            "missing_items": sum(len(s.missing) for s in compared),
        }
