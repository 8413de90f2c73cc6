"""Shared fixtures for catalog reconciliation tests."""

import csv
from pathlib import Path
from typing import Iterable, Sequence

import pytest

EXPORT_COLUMNS = [
    "Track name",
    "Artist name",
    "Album",
    "Playlist name",
    "Type",
    "ISRC",
    "Tidal - id",
]


def write_export(path: Path, rows: Iterable[Sequence[str]]) -> Path:
    """Write a library export CSV.

    Rows are ``(track, artist, album, playlist, type, isrc)`` tuples.
    """
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(EXPORT_COLUMNS)
        for row in rows:
            writer.writerow([*row, ""])
    return path


@pytest.fixture
def make_export():
    """Return the export writer helper."""
    return write_export


@pytest.fixture
def export_dir(tmp_path: Path) -> Path:
    """Directory with Spotify, TIDAL and Qobuz exports."""
    write_export(
        tmp_path / "My Spotify Library.csv",
        [
            ("", "Daft Punk", "Discovery", "", "Album", "00123"),
            ("", "Air", "Moon Safari", "", "Album", "456"),
            ("One More Time", "Daft Punk", "Discovery", "", "Favorite", "fr001"),
            ("Sexy Boy", "Air", "Moon Safari", "", "Favorite", "fr002"),
            ("La Femme d'Argent", "Air", "Moon Safari", "Chill", "Playlist", "fr003"),
            ("Sexy Boy", "Air", "Moon Safari", "Chill", "Playlist", "fr002"),
            ("Aerodynamic", "Daft Punk", "Discovery", "Only Here", "Playlist", "fr004"),
        ],
    )
    write_export(
        tmp_path / "My TIDAL Library.csv",
        [
            ("", "Daft Punk", "Discovery", "", "Album", "123"),
            ("", "Air", "Moon Safari", "", "Album", "456"),
            ("", "Justice", "Cross", "", "Album", "78999"),
            ("Sexy Boy", "Air", "Moon Safari", "", "Favorite", "FR002"),
            ("One More Time", "Daft Punk", "Discovery", "", "Favorite", "FR001"),
            ("La Femme d'Argent", "Air", "Moon Safari", "Chill", "Playlist", "FR003"),
            ("Sexy Boy", "Air", "Moon Safari", "Chill", "Playlist", "FR002"),
        ],
    )
    write_export(
        tmp_path / "My Qobuz Library.csv",
        [
            ("", "Daft Punk", "Discovery", "", "Album", "123"),
            ("", "Air", "Moon Safari", "", "Album", "456"),
            ("", "Justice", "Cross", "", "Album", "789"),
            ("One More Time", "Daft Punk", "Discovery", "", "Favorite", "FR001"),
            ("Sexy Boy", "Air", "Moon Safari", "", "Favorite", "FR002"),
            ("La Femme d'Argent", "Air", "Moon Safari", "Chill", "Playlist", "FR003"),
            ("Sexy Boy", "Air", "Moon Safari", "Chill", "Playlist", "FR002"),
        ],
    )
    return tmp_path
