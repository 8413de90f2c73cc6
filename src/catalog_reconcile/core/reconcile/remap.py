"""Position-preserving identifier replacement.

Some releases carry different identifiers on different services (for
example a standard and a hi-res edition of the same album). A caller
supplied list of ``(old, new)`` pairs aligns them before any comparison.
Replacing a key must keep its entry where it was: the order checks depend
on it.
"""

import logging
from typing import Dict, Iterable, Mapping, Tuple, TypeVar

from ...exceptions import RemapError
from ...models.models import Catalog
from .identifiers import normalize

logger = logging.getLogger(__name__)

V = TypeVar("V")

REMAPPABLE_SECTIONS = ("albums", "tracks")


def remap_identifiers(
    mapping: Mapping[str, V], pairs: Iterable[Tuple[str, str]]
) -> Dict[str, V]:
    """Replace keys of an ordered mapping in place of their old position.

    Args:
        mapping: Ordered mapping to remap
        pairs: ``(old_identifier, new_identifier)`` pairs, applied in order

    Returns:
        New ordered mapping with the replaced keys

    Raises:
        RemapError: If an old identifier is absent, or the new identifier is
            already used by another entry
    """
    keys = list(mapping)
    values = dict(mapping)

    for old_identifier, new_identifier in pairs:
        if old_identifier not in values:
            raise RemapError(f"Cannot remap unknown identifier '{old_identifier}'")
        if old_identifier == new_identifier:
            continue
        if new_identifier in values:
            raise RemapError(
                f"Cannot remap '{old_identifier}' to '{new_identifier}': "
                "target identifier already present"
            )

        keys[keys.index(old_identifier)] = new_identifier
        values[new_identifier] = values.pop(old_identifier)
        logger.debug("Remapped %s -> %s", old_identifier, new_identifier)

    return {key: values[key] for key in keys}


def apply_remaps(
    catalog: Catalog, section: str, pairs: Iterable[Tuple[str, str]]
) -> None:
    """Apply remaps to one section of a catalog.

    Identifiers are normalized the same way the catalog keys are.

    Raises:
        RemapError: If the section cannot be remapped or a pair is invalid
    """
    if section not in REMAPPABLE_SECTIONS:
        raise RemapError(
            f"Section '{section}' cannot be remapped "
            f"(expected one of: {', '.join(REMAPPABLE_SECTIONS)})"
        )

    normalized = [(normalize(old), normalize(new)) for old, new in pairs]
    try:
        remapped = remap_identifiers(getattr(catalog, section), normalized)
    except RemapError as e:
        raise RemapError(f"{catalog.source} {section}: {e}") from e

    setattr(catalog, section, remapped)
    logger.info(
        "Applied %d remap(s) to %s %s", len(normalized), catalog.source, section
    )
