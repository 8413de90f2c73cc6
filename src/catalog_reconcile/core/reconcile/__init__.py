"""Catalog reconciliation: normalization, order checks and set differences."""

from .engine import CatalogReconciler, compare_missing, compare_order
from .findings import (
    MissingFrom,
    OrderDivergence,
    ReconciliationReport,
    SectionKind,
    SectionReport,
)
from .identifiers import normalize, normalize_artist_name
from .order_aligner import find_first_divergence
from .plan import (
    ComparisonPlan,
    MissingCheck,
    OrderCheck,
    SectionPlan,
    build_plan,
    three_source_plan,
    two_source_plan,
)
from .remap import apply_remaps, remap_identifiers
from .set_reconciler import PrefixMode, missing

__all__ = [
    "CatalogReconciler",
    "ComparisonPlan",
    "MissingCheck",
    "MissingFrom",
    "OrderCheck",
    "OrderDivergence",
    "PrefixMode",
    "ReconciliationReport",
    "SectionKind",
    "SectionPlan",
    "SectionReport",
    "apply_remaps",
    "build_plan",
    "compare_missing",
    "compare_order",
    "find_first_divergence",
    "missing",
    "normalize",
    "normalize_artist_name",
    "remap_identifiers",
    "three_source_plan",
    "two_source_plan",
]
