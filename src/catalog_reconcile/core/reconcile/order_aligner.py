"""Detect where two sources disagree on the order of their shared items."""

import logging
from typing import Mapping, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")


def find_first_divergence(
    reference: Mapping[str, V], other: Mapping[str, V]
) -> Optional[Tuple[int, V]]:
    """Find the first position where ``other`` leaves ``reference``'s order.

    Both mappings are compared on their common identifiers only: entries of
    ``other`` unknown to ``reference`` are skipped, and entries of
    ``reference`` absent from ``other`` are stepped over. Once the reduced
    sequences disagree, the offending ``other`` entry is reported and the
    scan stops.

    Args:
        reference: Ordered mapping defining the expected order
        other: Ordered mapping checked against it

    Returns:
        ``(position, item)`` with ``position`` counted from 1 over all of
        ``other``'s entries, or None when no divergence is found
    """
    reference_keys = list(reference)
    cursor = 0

    for position, (identifier, item) in enumerate(other.items(), start=1):
        if identifier not in reference:
            continue

        while cursor < len(reference_keys) and reference_keys[cursor] not in other:
            cursor += 1

        if cursor == len(reference_keys):
            break

        if identifier != reference_keys[cursor]:
            logger.debug(
                "Order diverges at #%d: expected %s, found %s",
                position,
                reference_keys[cursor],
                identifier,
            )
            return position, item

        cursor += 1

    return None
