"""Loader for the identifier remap table.

The table is a JSON list of overrides, applied in file order::

    [
        {
            "source": "Spotify",
            "section": "albums",
            "old_identifier": "859727497927",
            "new_identifier": "859723464039"
        }
    ]
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Literal, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError

from ..core.reconcile.remap import apply_remaps
from ..exceptions import ConfigurationError, RemapError
from ..models.models import Catalog

logger = logging.getLogger(__name__)


class RemapOverride(BaseModel):
    """A known identifier equivalence for one source."""

    source: str
    section: Literal["albums", "tracks"] = "albums"
    old_identifier: str
    new_identifier: str

    model_config = ConfigDict(frozen=True)


def load_remap_table(path: Path) -> List[RemapOverride]:
    """Load remap overrides from a JSON file.

    Raises:
        ConfigurationError: If the file is missing or malformed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            entries = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Remap file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in remap file {path}: {e}") from e

    if not isinstance(entries, list):
        raise ConfigurationError(f"Remap file {path} must contain a JSON list")

    try:
        overrides = [RemapOverride.model_validate(entry) for entry in entries]
    except ValidationError as e:
        raise ConfigurationError(f"Invalid remap entry in {path}: {e}") from e

    logger.debug("Loaded %d remap override(s) from %s", len(overrides), path)
    return overrides


def apply_remap_table(
    catalogs: Mapping[str, Catalog], overrides: List[RemapOverride]
) -> None:
    """Apply overrides to the catalogs they name, before any comparison.

    Raises:
        RemapError: If an override names an unknown source or identifier
    """
    grouped: Dict[Tuple[str, str], List[Tuple[str, str]]] = {}
    for override in overrides:
        if override.source not in catalogs:
            raise RemapError(
                f"Remap for unknown source '{override.source}' "
                f"(known: {', '.join(catalogs)})"
            )
        grouped.setdefault((override.source, override.section), []).append(
            (override.old_identifier, override.new_identifier)
        )

    for (source, section), pairs in grouped.items():
        apply_remaps(catalogs[source], section, pairs)
