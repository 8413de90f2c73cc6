"""Comparison plans: which source pairs are checked, and how.

A plan names its sources explicitly and fixes, per check, which side is the
reference and which prefix direction applies. Nothing is inferred from the
data.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ...exceptions import ConfigurationError
from .set_reconciler import PrefixMode


@dataclass(frozen=True)
class OrderCheck:
    """Check that ``other`` keeps ``reference``'s order."""

    reference: str
    other: str


@dataclass(frozen=True)
class MissingCheck:
    """Report entries of ``present`` absent from ``reference``."""

    present: str
    reference: str
    prefix_mode: PrefixMode = PrefixMode.STRICT


@dataclass(frozen=True)
class SectionPlan:
    """Checks run for one catalog section."""

    order_checks: Tuple[OrderCheck, ...] = ()
    missing_checks: Tuple[MissingCheck, ...] = ()


@dataclass(frozen=True)
class ComparisonPlan:
    """Full set of checks for a run.

    ``sources[0]`` is the reference source: its playlists drive the
    per-playlist comparisons, which reuse the track section plan.
    """

    name: str
    sources: Tuple[str, ...]
    albums: SectionPlan
    tracks: SectionPlan
    artists: Optional[SectionPlan] = None

    @property
    def reference(self) -> str:
        """Get the reference source name."""
        return self.sources[0]


def three_source_plan(reference: str, primary: str, variant: str) -> ComparisonPlan:
    """Build the plan for a reference source and two compared services.

    ``variant`` encodes some album codes as shorter forms of ``primary``'s,
    so album membership between those two is prefix tolerant: a ``primary``
    album matches when a ``variant`` code prefixes it, and a ``variant``
    album matches when its code prefixes a ``primary`` code.

    Args:
        reference: Source of truth for ordering (e.g. "Spotify")
        primary: First compared service (e.g. "TIDAL")
        variant: Service with shortened codes (e.g. "Qobuz")

    Returns:
        ComparisonPlan for the three sources
    """
    order_checks = (
        OrderCheck(reference=reference, other=primary),
        OrderCheck(reference=reference, other=variant),
    )

    albums = SectionPlan(
        order_checks=order_checks,
        missing_checks=(
            MissingCheck(present=primary, reference=reference),
            MissingCheck(present=reference, reference=primary),
            MissingCheck(
                present=primary,
                reference=variant,
                prefix_mode=PrefixMode.REFERENCE_IS_PREFIX,
            ),
            MissingCheck(
                present=variant,
                reference=primary,
                prefix_mode=PrefixMode.PRESENT_IS_PREFIX,
            ),
        ),
    )
    tracks = SectionPlan(
        order_checks=order_checks,
        missing_checks=(
            MissingCheck(present=primary, reference=reference),
            MissingCheck(present=reference, reference=primary),
            MissingCheck(present=primary, reference=variant),
            MissingCheck(present=variant, reference=primary),
        ),
    )
    return ComparisonPlan(
        name="three-source",
        sources=(reference, primary, variant),
        albums=albums,
        tracks=tracks,
    )


def two_source_plan(reference: str, other: str) -> ComparisonPlan:
    """Build the plan for a reference source and a single compared service.

    Adds artist reconciliation, which only makes sense when both exports
    carry artist entries. Artist names are matched on their folded form with
    prefix tolerance: the reference often lists an artist by the bare name
    ("daft punk") where the compared service credits a longer form ("daft
    punk & friends"), so an ``other`` artist matches when a reference name
    prefixes it, and a reference artist matches when its name prefixes an
    ``other`` name.
    """
    both_ways = (
        MissingCheck(present=other, reference=reference),
        MissingCheck(present=reference, reference=other),
    )
    section = SectionPlan(
        order_checks=(OrderCheck(reference=reference, other=other),),
        missing_checks=both_ways,
    )
    artists = SectionPlan(
        missing_checks=(
            MissingCheck(
                present=other,
                reference=reference,
                prefix_mode=PrefixMode.REFERENCE_IS_PREFIX,
            ),
            MissingCheck(
                present=reference,
                reference=other,
                prefix_mode=PrefixMode.PRESENT_IS_PREFIX,
            ),
        )
    )
    return ComparisonPlan(
        name="two-source",
        sources=(reference, other),
        albums=section,
        tracks=section,
        artists=artists,
    )


PLAN_BUILDERS: Dict[str, Tuple[int, Callable[..., ComparisonPlan]]] = {
    "three-source": (3, three_source_plan),
    "two-source": (2, two_source_plan),
}


def available_plans() -> List[str]:
    """Get the names of the built-in plans."""
    return list(PLAN_BUILDERS)


def build_plan(name: str, sources: Sequence[str]) -> ComparisonPlan:
    """Build a named plan for the given sources (reference first).

    Raises:
        ConfigurationError: If the plan is unknown or the source count is wrong
    """
    if name not in PLAN_BUILDERS:
        raise ConfigurationError(
            f"Unknown comparison plan '{name}' "
            f"(expected one of: {', '.join(available_plans())})"
        )

    expected, builder = PLAN_BUILDERS[name]
    if len(sources) != expected:
        raise ConfigurationError(
            f"Plan '{name}' needs {expected} sources, got {len(sources)}: "
            f"{', '.join(sources) or '(none)'}"
        )
    if len(set(sources)) != len(sources):
        raise ConfigurationError(f"Duplicate source names: {', '.join(sources)}")

    return builder(*sources)
