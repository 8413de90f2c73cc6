"""Reconciliation engine driving the order and membership checks.

The engine walks a ComparisonPlan section by section (artists, albums,
favorite tracks, then each playlist of the reference source) and collects
findings. All comparisons are pure reads over catalogs that were fully
built, and remapped, beforehand.
"""

import logging
from typing import Collection, Dict, List, Mapping, Optional

from ...exceptions import ReconciliationError
from ...models.models import Catalog
from .findings import (
    Finding,
    Item,
    MissingFrom,
    OrderDivergence,
    ReconciliationReport,
    SectionKind,
    SectionReport,
)
from .order_aligner import find_first_divergence
from .plan import ComparisonPlan, SectionPlan
from .set_reconciler import PrefixMode, missing

logger = logging.getLogger(__name__)

SECTION_NAMES = ("artists", "albums", "tracks", "playlists")


def compare_order(
    reference: Mapping[str, Item],
    other: Mapping[str, Item],
    reference_label: str,
    other_label: str,
) -> List[OrderDivergence]:
    """Run the order check for one pair of sources.

    Returns:
        A single-element list with the first divergence, or an empty list
    """
    divergence = find_first_divergence(reference, other)
    if divergence is None:
        return []

    position, item = divergence
    return [
        OrderDivergence(
            position=position,
            other_source=other_label,
            reference_source=reference_label,
            item=item,
        )
    ]


def compare_missing(
    present: Mapping[str, Item],
    reference: Mapping[str, Item],
    present_label: str,
    reference_label: str,
    prefix_mode: PrefixMode = PrefixMode.STRICT,
) -> List[MissingFrom]:
    """Run the membership check for one pair of sources.

    Returns:
        One finding per entry of ``present`` missing from ``reference``,
        sorted by entity
    """
    return [
        MissingFrom(
            absent_source=reference_label,
            present_source=present_label,
            identifier=identifier,
            item=item,
        )
        for identifier, item in missing(present, reference, prefix_mode)
    ]


class CatalogReconciler:
    """Reconciles per-source catalogs according to a comparison plan."""

    def __init__(self, plan: ComparisonPlan):
        """Initialize the reconciler.

        Args:
            plan: Checks to run and the sources they refer to
        """
        self.plan = plan

    def reconcile(
        self,
        catalogs: Mapping[str, Catalog],
        playlist: Optional[str] = None,
        sections: Optional[Collection[str]] = None,
    ) -> ReconciliationReport:
        """Reconcile all catalogs.

        Args:
            catalogs: Catalog per source name, covering every plan source
            playlist: Optional playlist name to restrict playlist comparisons to
            sections: Optional subset of ``SECTION_NAMES`` to run

        Returns:
            ReconciliationReport with one SectionReport per compared section

        Raises:
            ReconciliationError: If a catalog is missing, a section name is
                unknown or not part of the plan, or the requested playlist is not
                on the reference source
        """
        missing_sources = [s for s in self.plan.sources if s not in catalogs]
        if missing_sources:
            raise ReconciliationError(
                f"No catalog for source(s): {', '.join(missing_sources)}"
            )

        selected = set(SECTION_NAMES if sections is None else sections)
        unknown = selected - set(SECTION_NAMES)
        if unknown:
            raise ReconciliationError(
                f"Unknown section(s): {', '.join(sorted(unknown))}"
            )
        if sections is not None and "artists" in selected and self.plan.artists is None:
            raise ReconciliationError(
                f"Plan '{self.plan.name}' does not compare artists"
            )

        report = ReconciliationReport(
            plan_name=self.plan.name, sources=list(self.plan.sources)
        )

        if self.plan.artists is not None and "artists" in selected:
            artists = {s: catalogs[s].artists for s in self.plan.sources}
            report.add_section(
                self._compare_section(SectionKind.ARTISTS, self.plan.artists, artists)
            )

        if "albums" in selected:
            albums = {s: catalogs[s].albums for s in self.plan.sources}
            report.add_section(
                self._compare_section(SectionKind.ALBUMS, self.plan.albums, albums)
            )

        if "tracks" in selected:
            tracks = {s: catalogs[s].tracks for s in self.plan.sources}
            report.add_section(
                self._compare_section(SectionKind.TRACKS, self.plan.tracks, tracks)
            )

        if "playlists" in selected:
            for section in self._compare_playlists(catalogs, playlist):
                report.add_section(section)

        logger.info("Reconciliation complete: %s", report.get_summary())
        return report

    def _compare_section(
        self,
        kind: SectionKind,
        section_plan: SectionPlan,
        mappings: Dict[str, Mapping[str, Item]],
        name: Optional[str] = None,
    ) -> SectionReport:
        findings: List[Finding] = []

        for order_check in section_plan.order_checks:
            findings.extend(
                compare_order(
                    mappings[order_check.reference],
                    mappings[order_check.other],
                    order_check.reference,
                    order_check.other,
                )
            )

        for missing_check in section_plan.missing_checks:
            findings.extend(
                compare_missing(
                    mappings[missing_check.present],
                    mappings[missing_check.reference],
                    missing_check.present,
                    missing_check.reference,
                    missing_check.prefix_mode,
                )
            )

        logger.debug(
            "%s%s: %d finding(s)", kind.value, f" '{name}'" if name else "", len(findings)
        )
        return SectionReport(kind=kind, name=name, findings=findings)

    def _compare_playlists(
        self, catalogs: Mapping[str, Catalog], playlist: Optional[str]
    ) -> List[SectionReport]:
        reference_playlists = catalogs[self.plan.reference].playlists

        if playlist is not None and playlist not in reference_playlists:
            raise ReconciliationError(
                f"Playlist '{playlist}' not found on {self.plan.reference}"
            )

        reports = []
        for name in reference_playlists:
            if playlist is not None and name != playlist:
                continue

            tracks: Dict[str, Mapping[str, Item]] = {}
            skipped_on = None
            for source in self.plan.sources:
                if name not in catalogs[source].playlists:
                    skipped_on = source
                    break
                tracks[source] = catalogs[source].playlists[name]

            if skipped_on is not None:
                logger.info("Playlist '%s' missing on %s, skipping", name, skipped_on)
                reports.append(
                    SectionReport(
                        kind=SectionKind.PLAYLIST, name=name, skipped_on=skipped_on
                    )
                )
                continue

            reports.append(
                self._compare_section(
                    SectionKind.PLAYLIST, self.plan.tracks, tracks, name=name
                )
            )

        return reports
