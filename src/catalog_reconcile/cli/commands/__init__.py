"""CLI command modules."""

from .compare import compare_command
from .inventory import inventory_command

__all__ = [
    "compare_command",
    "inventory_command",
]
