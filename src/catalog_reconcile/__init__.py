"""Music Catalog Reconciliation Tool.

Compares a listener's library exports (favourite albums, tracks and playlists)
from several streaming services and reports items missing on one service and
items whose order differs between services.
"""

__version__ = "1.0.0"

from .core.reconcile import (
    CatalogReconciler,
    PrefixMode,
    build_plan,
    find_first_divergence,
    missing,
    normalize,
)
from .models import Album, Artist, Catalog, Track

__all__ = [
    "Album",
    "Artist",
    "Catalog",
    "CatalogReconciler",
    "PrefixMode",
    "Track",
    "build_plan",
    "find_first_divergence",
    "missing",
    "normalize",
]
