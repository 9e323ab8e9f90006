"""Tests for the ranking engine tie-break cascade."""

import pytest

from standings.ranking.engine import (
    assign_positions,
    compare_entries,
    last_placement,
    rank_entries,
    sort_entries,
    weighted_finishes,
)
from standings.schemas.standings import LeaderboardEntry


def entry(name, matches=(), total=0, total_point=0, position=""):
    return LeaderboardEntry(
        name=name, matches=matches, total=total, total_point=total_point, position=position
    )


class TestHelpers:
    """Tests for cascade helper functions."""

    def test_weighted_finishes(self):
        assert weighted_finishes((1, 1, 2, 2, 0, 0)) == 2 * 2 + 4
        assert weighted_finishes((2, 3, 4, 5, 0, 0)) == 3
        assert weighted_finishes((0, 0, 0, 0, 0, 0)) == 0

    def test_last_placement(self):
        assert last_placement((0, 0, 2, 0, 0, 0)) == 2
        assert last_placement((3, 0, 0, 0, 0, 0)) == 3
        assert last_placement((0,) * 6) == 9


class TestCascade:
    """Each cascade level decides when all earlier levels tie."""

    def test_primary_key_descending(self):
        entries = [entry("a", total_point=10), entry("b", total_point=80), entry("c", total_point=40)]
        ranked = sort_entries(entries, sort_by="totalPoint")
        assert [e.total_point for e in ranked] == [80, 40, 10]

    def test_sort_by_total(self):
        entries = [entry("a", total=5, total_point=90), entry("b", total=9, total_point=10)]
        assert [e.name for e in sort_entries(entries, sort_by="total")] == ["b", "a"]
        assert [e.name for e in sort_entries(entries, sort_by="totalPoint")] == ["a", "b"]

    def test_secondary_key(self):
        a = entry("a", total=10, total_point=50)
        b = entry("b", total=20, total_point=50)
        assert compare_entries(a, b, "totalPoint") > 0
        assert [e.name for e in sort_entries([a, b])] == ["b", "a"]

    def test_weighted_finishes_level(self):
        a = entry("a", (1, 1, 2, 2, 0, 0), total=10, total_point=50)
        b = entry("b", (2, 3, 4, 5, 0, 0), total=10, total_point=50)
        assert compare_entries(a, b) < 0
        assert [e.name for e in sort_entries([b, a])] == ["a", "b"]

    def test_placement_distribution_level(self):
        # Same weighted score (1 win, 3 top-4); more 2nd places wins
        a = entry("a", (1, 2, 2, 5, 0, 0), total=10, total_point=50)
        b = entry("b", (1, 2, 3, 5, 0, 0), total=10, total_point=50)
        assert weighted_finishes(a.matches) == weighted_finishes(b.matches)
        assert compare_entries(a, b) < 0
        assert [e.name for e in sort_entries([b, a])] == ["a", "b"]

    def test_identical_distribution_in_different_order(self):
        a = entry("a", (1, 2, 3, 4, 5, 6), total=10, total_point=50)
        b = entry("b", (2, 1, 3, 4, 5, 6), total=10, total_point=50)
        assert compare_entries(a, b) == 0

    def test_most_recent_placement_level(self):
        a = entry("a", (0, 0, 2, 0, 0, 0), total=10, total_point=50)
        b = entry("b", (3, 0, 0, 0, 0, 0), total=10, total_point=50)
        assert [e.name for e in sort_entries([b, a])] == ["a", "b"]

    def test_most_recent_placement_decides_same_distribution(self):
        a = entry("a", (3, 0, 0, 2, 0, 0), total=10, total_point=50)
        b = entry("b", (2, 0, 0, 3, 0, 0), total=10, total_point=50)
        assert compare_entries(a, b) < 0
        assert [e.name for e in sort_entries([b, a])] == ["a", "b"]

    def test_never_played_ranks_last(self):
        a = entry("a", (0,) * 6, total=0, total_point=0)
        b = entry("b", (0, 0, 0, 0, 0, 8), total=0, total_point=0)
        assert [e.name for e in sort_entries([a, b])] == ["b", "a"]

    def test_full_tie_is_zero(self):
        a = entry("a", (1, 4, 0, 0, 0, 0), total=3, total_point=3)
        b = entry("b", (1, 4, 0, 0, 0, 0), total=3, total_point=3)
        assert compare_entries(a, b) == 0


class TestDirection:
    """Ascending order inverts every level of the cascade."""

    def test_asc_reverses_primary(self):
        entries = [entry("a", total_point=10), entry("b", total_point=80), entry("c", total_point=40)]
        ranked = sort_entries(entries, order="asc")
        assert [e.total_point for e in ranked] == [10, 40, 80]

    def test_asc_reverses_tie_breaks(self):
        a = entry("a", (1, 1, 2, 2, 0, 0), total=10, total_point=50)
        b = entry("b", (2, 3, 4, 5, 0, 0), total=10, total_point=50)
        assert [e.name for e in sort_entries([a, b], order="asc")] == ["b", "a"]

    def test_unknown_values_fall_back(self):
        entries = [entry("a", total=1, total_point=10), entry("b", total=2, total_point=5)]
        ranked = sort_entries(entries, sort_by="bogus", order="sideways")
        assert [e.name for e in ranked] == ["a", "b"]


class TestPositions:
    """Tests for position assignment."""

    def test_source_positions_are_replaced(self):
        entries = [
            entry("a", total_point=10, position="7"),
            entry("b", total_point=80, position="1"),
            entry("c", total_point=40, position=""),
        ]
        ranked = rank_entries(entries)
        assert [e.position for e in ranked] == ["1", "2", "3"]
        assert [e.name for e in ranked] == ["b", "c", "a"]

    def test_inputs_are_not_mutated(self):
        original = entry("a", total_point=1, position="9")
        assign_positions([original])
        assert original.position == "9"

    def test_empty(self):
        assert rank_entries([]) == []


class TestEntryModel:
    """Tests for the fixed placement slot count."""

    @pytest.mark.parametrize(
        "matches, expected",
        [((), (0,) * 6), ((1, 2), (1, 2, 0, 0, 0, 0)), ((1, 2, 3, 4, 5, 6, 7), (1, 2, 3, 4, 5, 6))],
    )
    def test_six_slots(self, matches, expected):
        assert entry("x", matches).matches == expected

    def test_wire_names(self):
        data = entry("x", (1,), total=3, total_point=4).model_dump(by_alias=True)
        assert data["totalPoint"] == 4
        assert data["matches"] == (1, 0, 0, 0, 0, 0)
