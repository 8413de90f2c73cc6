"""Tests for comparison plans."""

import pytest

from catalog_reconcile.core.reconcile.plan import (
    MissingCheck,
    OrderCheck,
    available_plans,
    build_plan,
    three_source_plan,
    two_source_plan,
)
from catalog_reconcile.core.reconcile.set_reconciler import PrefixMode
from catalog_reconcile.exceptions import ConfigurationError


class TestThreeSourcePlan:
    """Test the reference + two services plan."""

    def test_order_checks_use_reference(self):
        """Both services are order-checked against the reference."""
        plan = three_source_plan("Spotify", "TIDAL", "Qobuz")

        expected = (
            OrderCheck(reference="Spotify", other="TIDAL"),
            OrderCheck(reference="Spotify", other="Qobuz"),
        )
        assert plan.albums.order_checks == expected
        assert plan.tracks.order_checks == expected
        assert plan.reference == "Spotify"
        assert plan.artists is None

    def test_album_prefix_directions_are_pinned(self):
        """Primary vs variant album checks tolerate prefixes, each one way."""
        plan = three_source_plan("Spotify", "TIDAL", "Qobuz")

        assert (
            MissingCheck("TIDAL", "Qobuz", PrefixMode.REFERENCE_IS_PREFIX)
            in plan.albums.missing_checks
        )
        assert (
            MissingCheck("Qobuz", "TIDAL", PrefixMode.PRESENT_IS_PREFIX)
            in plan.albums.missing_checks
        )

    def test_reference_album_checks_are_strict(self):
        """Test membership against the reference source."""
        plan = three_source_plan("Spotify", "TIDAL", "Qobuz")

        assert MissingCheck("TIDAL", "Spotify") in plan.albums.missing_checks
        assert MissingCheck("Spotify", "TIDAL") in plan.albums.missing_checks

    def test_track_checks_are_strict(self):
        """Tracks never use prefix matching."""
        plan = three_source_plan("Spotify", "TIDAL", "Qobuz")

        assert len(plan.tracks.missing_checks) == 4
        assert all(
            check.prefix_mode == PrefixMode.STRICT
            for check in plan.tracks.missing_checks
        )


class TestTwoSourcePlan:
    """Test the reference + one service plan."""

    def test_includes_artist_reconciliation(self):
        """Test that artists are compared both ways."""
        plan = two_source_plan("Spotify", "TIDAL")

        assert plan.artists is not None
        assert plan.artists.order_checks == ()
        assert {(c.present, c.reference) for c in plan.artists.missing_checks} == {
            ("TIDAL", "Spotify"),
            ("Spotify", "TIDAL"),
        }

    def test_artist_prefix_directions_are_pinned(self):
        """Artist names tolerate prefixes, each way in its own direction."""
        plan = two_source_plan("Spotify", "TIDAL")

        assert plan.artists.missing_checks == (
            MissingCheck("TIDAL", "Spotify", PrefixMode.REFERENCE_IS_PREFIX),
            MissingCheck("Spotify", "TIDAL", PrefixMode.PRESENT_IS_PREFIX),
        )

    def test_album_and_track_checks_stay_strict(self):
        """Only artist checks use prefix matching."""
        plan = two_source_plan("Spotify", "TIDAL")

        for section in (plan.albums, plan.tracks):
            assert all(
                check.prefix_mode == PrefixMode.STRICT
                for check in section.missing_checks
            )


class TestBuildPlan:
    """Test plan selection by name."""

    def test_available_plans(self):
        """Test the registered plan names."""
        assert available_plans() == ["three-source", "two-source"]

    def test_builds_named_plan(self):
        """Test building a plan from config values."""
        plan = build_plan("two-source", ["Spotify", "TIDAL"])
        assert plan.name == "two-source"
        assert plan.sources == ("Spotify", "TIDAL")

    def test_unknown_plan_raises(self):
        """Test an unknown plan name."""
        with pytest.raises(ConfigurationError, match="Unknown comparison plan"):
            build_plan("four-source", ["A", "B", "C", "D"])

    def test_wrong_source_count_raises(self):
        """Test a plan with the wrong number of sources."""
        with pytest.raises(ConfigurationError, match="needs 3 sources, got 2"):
            build_plan("three-source", ["Spotify", "TIDAL"])

    def test_duplicate_sources_raise(self):
        """Test that a source cannot be compared with itself."""
        with pytest.raises(ConfigurationError, match="Duplicate"):
            build_plan("two-source", ["TIDAL", "TIDAL"])
