"""Set membership reconciliation between two ordered mappings.

This module reports entries present in one source but absent from another.
Some vendors encode the same catalog code at different lengths (for example
by prepending extra digits), so a comparison can optionally accept a
prefix relationship between identifiers as a match. The direction of that
relationship is always chosen by the caller.
"""

import bisect
import logging
from enum import Enum
from typing import Callable, List, Mapping, Tuple

from .ordering import Entity, sort_entries

logger = logging.getLogger(__name__)


class PrefixMode(str, Enum):
    """How identifiers of differing length may still match."""

    STRICT = "strict"
    REFERENCE_IS_PREFIX = "reference_is_prefix"  # some reference key prefixes k
    PRESENT_IS_PREFIX = "present_is_prefix"  # k prefixes some reference key


def _reference_is_prefix_matcher(reference: Mapping[str, object]) -> Callable[[str], bool]:
    def matches(identifier: str) -> bool:
        return any(
            identifier[:length] in reference for length in range(len(identifier) + 1)
        )

    return matches


def _present_is_prefix_matcher(reference: Mapping[str, object]) -> Callable[[str], bool]:
    # Keys sharing a prefix are contiguous once sorted.
    sorted_keys = sorted(reference)

    def matches(identifier: str) -> bool:
        index = bisect.bisect_left(sorted_keys, identifier)
        return index < len(sorted_keys) and sorted_keys[index].startswith(identifier)

    return matches


def _exact_matcher(reference: Mapping[str, object]) -> Callable[[str], bool]:
    return reference.__contains__


_MATCHERS = {
    PrefixMode.STRICT: _exact_matcher,
    PrefixMode.REFERENCE_IS_PREFIX: _reference_is_prefix_matcher,
    PrefixMode.PRESENT_IS_PREFIX: _present_is_prefix_matcher,
}


def missing(
    present: Mapping[str, Entity],
    reference: Mapping[str, Entity],
    prefix_mode: PrefixMode = PrefixMode.STRICT,
) -> List[Tuple[str, Entity]]:
    """Get the entries of ``present`` that ``reference`` does not have.

    An entry keyed ``k`` is missing when ``reference`` has no entry at ``k``
    and, depending on ``prefix_mode``, no reference key is a prefix of ``k``
    (``REFERENCE_IS_PREFIX``) or ``k`` is a prefix of no reference key
    (``PRESENT_IS_PREFIX``).

    Args:
        present: Mapping whose entries are checked
        reference: Mapping they are looked up in
        prefix_mode: Whether and in which direction prefixes count as matches

    Returns:
        ``(identifier, entity)`` pairs sorted by entity, not by source order
    """
    matches = _MATCHERS[PrefixMode(prefix_mode)](reference)
    absent = [
        (identifier, entity)
        for identifier, entity in present.items()
        if identifier not in reference and not matches(identifier)
    ]

    logger.debug(
        "%d of %d entries missing from reference (%s)",
        len(absent),
        len(present),
        PrefixMode(prefix_mode).value,
    )
    return sort_entries(absent)

