"""Tests for the order aligner."""

import itertools

import pytest

from catalog_reconcile.core.reconcile.order_aligner import find_first_divergence


def ordered(keys):
    """Build an ordered mapping whose values are ``item-<key>``."""
    return {key: f"item-{key}" for key in keys}


class TestNoDivergence:
    """Cases where both sources agree on the shared order."""

    def test_identical_order(self):
        """Test identical sequences."""
        reference = ordered("ABCD")
        assert find_first_divergence(reference, ordered("ABCD")) is None

    def test_empty_mappings(self):
        """Test empty inputs on either side."""
        assert find_first_divergence({}, {}) is None
        assert find_first_divergence(ordered("AB"), {}) is None
        assert find_first_divergence({}, ordered("AB")) is None

    @pytest.mark.parametrize(
        "kept",
        [
            kept
            for size in range(5)
            for kept in itertools.combinations("ABCDE", size)
        ],
    )
    def test_any_subsequence_keeps_order(self, kept):
        """Deleting entries without reordering never diverges."""
        reference = ordered("ABCDE")
        assert find_first_divergence(reference, ordered(kept)) is None

    def test_entries_unknown_to_reference_are_ignored(self):
        """Test that extra entries in other are skipped."""
        reference = ordered("ABC")
        other = ordered(["X", "A", "Y", "B", "C", "Z"])
        assert find_first_divergence(reference, other) is None

    def test_reference_only_entries_are_stepped_over(self):
        """Test that entries absent from other are invisible."""
        reference = ordered(["A", "X", "B", "Y", "C"])
        assert find_first_divergence(reference, ordered("ABC")) is None


class TestDivergence:
    """Cases where the shared order differs."""

    def test_swap_reports_first_swapped_position(self):
        """Test the example of a reference [A,B,C,D] against [A,C,B]."""
        reference = ordered("ABCD")
        other = ordered("ACB")

        assert find_first_divergence(reference, other) == (2, "item-C")

    @pytest.mark.parametrize("index", range(4))
    def test_adjacent_swap(self, index):
        """Swapping two adjacent shared entries is found at the first of them."""
        keys = list("ABCDE")
        keys[index], keys[index + 1] = keys[index + 1], keys[index]

        result = find_first_divergence(ordered("ABCDE"), ordered(keys))

        assert result == (index + 1, f"item-{keys[index]}")

    def test_position_counts_non_shared_entries(self):
        """Positions index all of other's entries, starting at 1."""
        reference = ordered("AB")
        other = ordered(["X", "Y", "B", "A"])

        assert find_first_divergence(reference, other) == (3, "item-B")

    def test_only_first_divergence_is_reported(self):
        """Test that the scan stops at the first mismatch."""
        reference = ordered("ABCD")
        other = ordered("BADC")

        assert find_first_divergence(reference, other) == (1, "item-B")

    def test_reports_item_from_other(self):
        """The reported item comes from the compared mapping."""
        reference = {"A": "ref-A", "B": "ref-B"}
        other = {"B": "other-B", "A": "other-A"}

        assert find_first_divergence(reference, other) == (1, "other-B")

    def test_does_not_mutate_inputs(self):
        """Test that both mappings are left untouched."""
        reference = ordered("ABC")
        other = ordered("CBA")

        find_first_divergence(reference, other)

        assert list(reference) == ["A", "B", "C"]
        assert list(other) == ["C", "B", "A"]
