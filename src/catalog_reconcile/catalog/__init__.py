"""Adapters turning export files into catalogs."""

from .builder import CatalogBuilder, ExportRecord
from .remap_table import RemapOverride, apply_remap_table, load_remap_table

__all__ = [
    "CatalogBuilder",
    "ExportRecord",
    "RemapOverride",
    "apply_remap_table",
    "load_remap_table",
]
