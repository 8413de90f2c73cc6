"""Data models for the catalog reconciliation tool."""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Album(BaseModel):
    """Represents a favorite album."""

    artist: str
    title: str

    model_config = ConfigDict(frozen=True)

    @property
    def sort_key(self) -> Tuple[str, str]:
        """Case-insensitive (artist, title) ordering key."""
        return (self.artist.lower(), self.title.lower())

    def get_display_name(self) -> str:
        """Get album information for display."""
        return f"{self.artist} - {self.title}"


class Track(BaseModel):
    """Represents a favorite track or a playlist entry."""

    artist: str
    album: str
    title: str

    model_config = ConfigDict(frozen=True)

    @property
    def sort_key(self) -> Tuple[str, str, str]:
        """Case-insensitive (artist, album, title) ordering key."""
        return (self.artist.lower(), self.album.lower(), self.title.lower())

    def get_display_name(self) -> str:
        """Get track information for display."""
        return f"{self.artist} - {self.album} / {self.title}"


class Artist(BaseModel):
    """Represents a followed artist, keyed by its folded name in a catalog."""

    name: str

    model_config = ConfigDict(frozen=True)

    @property
    def sort_key(self) -> Tuple[str]:
        """Case-insensitive name ordering key."""
        return (self.name.lower(),)

    def get_display_name(self) -> str:
        """Get artist information for display."""
        return self.name


class Catalog(BaseModel):
    """One source's exported library.

    Every mapping keeps the row order of the export file. That order is what
    the order checks inspect, so it must never be re-sorted.
    """

    source: str
    albums: Dict[str, Album] = Field(default_factory=dict)
    tracks: Dict[str, Track] = Field(default_factory=dict)
    playlists: Dict[str, Dict[str, Track]] = Field(default_factory=dict)
    artists: Dict[str, Artist] = Field(default_factory=dict)

    @property
    def playlist_track_count(self) -> int:
        """Get number of entries across all playlists."""
        return sum(len(tracks) for tracks in self.playlists.values())

    def summary(self) -> Dict[str, int]:
        """Get per-section entry counts."""
        return {
            "artists": len(self.artists),
            "albums": len(self.albums),
            "tracks": len(self.tracks),
            "playlists": len(self.playlists),
            "playlist_tracks": self.playlist_track_count,
        }
