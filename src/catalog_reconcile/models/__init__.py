"""Models for the catalog reconciliation tool."""

from .models import Album, Artist, Catalog, Track

__all__ = [
    "Album",
    "Artist",
    "Catalog",
    "Track",
]
