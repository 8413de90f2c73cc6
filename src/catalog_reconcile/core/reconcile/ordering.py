"""Deterministic presentation order for unordered results."""

from typing import Iterable, List, Tuple, TypeVar, Union

from ...models.models import Album, Artist, Track

Entity = TypeVar("Entity", bound=Union[Album, Track, Artist])


def sort_entries(entries: Iterable[Tuple[str, Entity]]) -> List[Tuple[str, Entity]]:
    """Sort ``(identifier, entity)`` pairs by the entity's ``sort_key``.

    Albums order by (artist, title), tracks by (artist, album, title) and
    artists by name, all lowercased. ``sorted`` is stable, so entries that
    differ only in case keep the order in which they were produced.
    """
    return sorted(entries, key=lambda entry: entry[1].sort_key)
