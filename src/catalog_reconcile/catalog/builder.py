"""Catalog builder reading a service's CSV library export.

Each row of an export describes one entry: a favorite album, a favorite
track, a followed artist, or a track of a named playlist. The builder keeps
the file's row order in every mapping it produces.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.reconcile.identifiers import normalize, normalize_artist_name
from ..exceptions import CatalogBuildError
from ..models.models import Album, Artist, Catalog, Track

logger = logging.getLogger(__name__)

ALBUM_TYPE = "Album"
FAVORITE_TYPE = "Favorite"
ARTIST_TYPE = "Artist"


class ExportRecord(BaseModel):
    """One row of a library export.

    Vendor id columns ("Tidal - id", "Spotify - id", ...) are ignored.
    """

    track_name: str = Field(alias="Track name")
    artist_name: str = Field(alias="Artist name")
    album: str = Field(alias="Album")
    playlist_name: str = Field(alias="Playlist name")
    type: str = Field(alias="Type")
    isrc: str = Field(alias="ISRC")

    model_config = ConfigDict(extra="ignore")

    def to_track(self) -> Track:
        """Convert row to a Track."""
        return Track(artist=self.artist_name, album=self.album, title=self.track_name)


REQUIRED_COLUMNS = tuple(
    field.alias for field in ExportRecord.model_fields.values() if field.alias
)


class CatalogBuilder:
    """Builds a Catalog from a CSV export file."""

    def __init__(self, encoding: str = "utf-8-sig", delimiter: str = ","):
        """Initialize catalog builder.

        Args:
            encoding: Text encoding of export files
            delimiter: CSV field delimiter
        """
        self.encoding = encoding
        self.delimiter = delimiter

    def build(self, source: str, path: Path) -> Catalog:
        """Read an export file into a catalog.

        Args:
            source: Source name the catalog is labelled with
            path: Path to the CSV export

        Returns:
            Catalog preserving the file's row order

        Raises:
            CatalogBuildError: If the file cannot be read or a row is invalid
        """
        if not path.is_file():
            raise CatalogBuildError(f"{source} export not found: {path}")

        albums: Dict[str, Album] = {}
        tracks: Dict[str, Track] = {}
        playlists: Dict[str, Dict[str, Track]] = {}
        artists: Dict[str, Artist] = {}

        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                reader = csv.DictReader(f, delimiter=self.delimiter)
                self._check_columns(path, reader.fieldnames)

                for row_number, row in enumerate(reader, start=1):
                    record = self._parse_row(path, row_number, row)
                    identifier = normalize(record.isrc)

                    if record.type == ALBUM_TYPE:
                        albums[identifier] = Album(
                            artist=record.artist_name, title=record.album
                        )
                    elif record.type == FAVORITE_TYPE:
                        tracks[identifier] = record.to_track()
                    elif record.type == ARTIST_TYPE:
                        artist = Artist(name=record.artist_name)
                        artists[normalize_artist_name(record.artist_name)] = artist
                    else:
                        playlist = playlists.setdefault(record.playlist_name, {})
                        playlist[identifier] = record.to_track()
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise CatalogBuildError(f"Failed to read {source} export {path}: {e}") from e

        catalog = Catalog(
            source=source,
            albums=albums,
            tracks=tracks,
            playlists=playlists,
            artists=artists,
        )
        logger.info("Loaded %s catalog from %s: %s", source, path, catalog.summary())
        return catalog

    def _check_columns(self, path: Path, fieldnames: Optional[list]) -> None:
        missing = [c for c in REQUIRED_COLUMNS if c not in (fieldnames or [])]
        if missing:
            raise CatalogBuildError(
                f"{path}: missing column(s): {', '.join(missing)}"
            )

    def _parse_row(self, path: Path, row_number: int, row: Dict) -> ExportRecord:
        # Cells beyond the header end up under the None key
        cells = {key: value for key, value in row.items() if key is not None}
        try:
            return ExportRecord.model_validate(cells)
        except ValidationError as e:
            raise CatalogBuildError(f"{path}, row {row_number}: {e}") from e
