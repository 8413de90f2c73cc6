"""Identifier canonicalization.

Catalog codes (ISRC/UPC style) are exported with inconsistent zero padding
and casing depending on the service. Both helpers here are total: they
never raise, and an empty or all-zero code becomes the empty key.
"""


def normalize(raw: str) -> str:
    """Canonicalize a raw catalog code into a comparable identifier.

    Strips the contiguous run of leading ``'0'`` characters, then upper-cases
    the remainder. Two codes with the same result are treated as the same
    catalog item.

    Example:
        >>> normalize("00usum71703861")
        'USUM71703861'
    """
    return raw.lstrip("0").upper()


def normalize_artist_name(name: str) -> str:
    """Fold an artist display name into its lookup key."""
    return name.strip().casefold()
