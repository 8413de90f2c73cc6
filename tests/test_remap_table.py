"""Tests for loading and applying the remap table."""

import json

import pytest

from catalog_reconcile.catalog.remap_table import (
    RemapOverride,
    apply_remap_table,
    load_remap_table,
)
from catalog_reconcile.exceptions import ConfigurationError, RemapError
from catalog_reconcile.models import Album, Catalog


def write_table(tmp_path, entries):
    """Write a remap table and return its path."""
    path = tmp_path / "remaps.json"
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path


class TestLoadRemapTable:
    """Test reading the JSON table."""

    def test_loads_entries_in_order(self, tmp_path):
        """Test loading a valid table."""
        path = write_table(
            tmp_path,
            [
                {
                    "source": "Spotify",
                    "old_identifier": "859727497927",
                    "new_identifier": "859723464039",
                },
                {
                    "source": "Spotify",
                    "section": "tracks",
                    "old_identifier": "A",
                    "new_identifier": "B",
                },
            ],
        )

        overrides = load_remap_table(path)

        assert overrides[0] == RemapOverride(
            source="Spotify",
            section="albums",
            old_identifier="859727497927",
            new_identifier="859723464039",
        )
        assert overrides[1].section == "tracks"

    def test_missing_file(self, tmp_path):
        """Test a missing table."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_remap_table(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test a malformed table."""
        path = tmp_path / "remaps.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_remap_table(path)

    def test_table_must_be_a_list(self, tmp_path):
        """Test a table that is not a list."""
        path = write_table(tmp_path, {"Spotify": {}})

        with pytest.raises(ConfigurationError, match="JSON list"):
            load_remap_table(path)

    def test_invalid_section(self, tmp_path):
        """Only albums and tracks sections are accepted."""
        path = write_table(
            tmp_path,
            [
                {
                    "source": "Spotify",
                    "section": "playlists",
                    "old_identifier": "A",
                    "new_identifier": "B",
                }
            ],
        )

        with pytest.raises(ConfigurationError, match="Invalid remap entry"):
            load_remap_table(path)


class TestApplyRemapTable:
    """Test applying overrides to catalogs."""

    @pytest.fixture
    def catalogs(self):
        """Create Spotify and TIDAL catalogs."""
        album = Album(artist="Artist", title="Title")
        return {
            "Spotify": Catalog(source="Spotify", albums={"1": album, "2": album}),
            "TIDAL": Catalog(source="TIDAL", albums={"9": album}),
        }

    def test_applies_to_named_source_only(self, catalogs):
        """Test that other sources are left alone."""
        overrides = [
            RemapOverride(source="Spotify", old_identifier="1", new_identifier="9")
        ]

        apply_remap_table(catalogs, overrides)

        assert list(catalogs["Spotify"].albums) == ["9", "2"]
        assert list(catalogs["TIDAL"].albums) == ["9"]

    def test_unknown_source_raises(self, catalogs):
        """Test an override for a source that was not loaded."""
        overrides = [
            RemapOverride(source="Deezer", old_identifier="1", new_identifier="9")
        ]

        with pytest.raises(RemapError, match="unknown source 'Deezer'"):
            apply_remap_table(catalogs, overrides)

    def test_stale_identifier_aborts(self, catalogs):
        """A stale entry raises instead of being skipped."""
        overrides = [
            RemapOverride(source="TIDAL", old_identifier="1", new_identifier="2")
        ]

        with pytest.raises(RemapError, match="unknown identifier"):
            apply_remap_table(catalogs, overrides)
