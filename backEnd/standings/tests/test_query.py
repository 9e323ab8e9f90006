"""Tests for the query layer."""

import pytest

from standings.query.views import (
    PageRequest,
    leaderboard_view,
    lobby_search,
    paginate,
    parse_positive_int,
    players_view,
    top_performers,
)
from standings.ranking.engine import rank_entries
from standings.schemas.lobby import DayLobbies, Lobby, LobbyMember, Round
from standings.schemas.standings import LeaderboardEntry, Player


@pytest.fixture
def snapshot():
    """Ranked snapshot, as cached after a refresh."""
    entries = [
        LeaderboardEntry(name="Alice", total=4, total_point=10),
        LeaderboardEntry(name="Bob", total=3, total_point=60),
        LeaderboardEntry(name="Carol", total=2, total_point=80),
        LeaderboardEntry(name="alfred", total=1, total_point=40),
    ]
    return tuple(rank_entries(entries))


class TestParsing:
    """Tests for query-string coercion."""

    @pytest.mark.parametrize(
        "raw, expected",
        [(None, 10), ("", 10), ("abc", 10), ("0", 10), ("-3", 10), ("2.5", 10), ("25", 25), (" 7 ", 7)],
    )
    def test_parse_positive_int(self, raw, expected):
        assert parse_positive_int(raw, 10) == expected

    def test_defaults(self):
        request = PageRequest.from_query()
        assert (request.page, request.page_size) == (1, 10)
        assert request.sort_by == "totalPoint"
        assert request.order == "desc"
        assert request.name is None and request.min_point is None

    def test_guards_invalid_values(self):
        request = PageRequest.from_query(page="two", limit="lots", min_point="many", sort_by="elo", order="up")
        assert (request.page, request.page_size) == (1, 10)
        assert request.min_point is None
        assert request.sort_by == "totalPoint"
        assert request.order == "desc"

    def test_page_size_is_capped(self):
        assert PageRequest.from_query(limit="5000", max_page_size=100).page_size == 100


class TestPaginate:
    """Tests for paginate."""

    def test_meta(self):
        page = paginate(list(range(23)), page=3, page_size=10)
        assert page.items == [20, 21, 22]
        assert page.meta.total == 23
        assert page.meta.current_page == 3
        assert page.meta.page_size == 10
        assert page.meta.total_pages == 3

    def test_past_the_end(self):
        page = paginate([1, 2], page=5, page_size=10)
        assert page.items == []
        assert page.meta.total_pages == 1

    def test_empty(self):
        assert paginate([], 1, 10).meta.total_pages == 0

    def test_meta_wire_names(self):
        meta = paginate([1], 1, 10).meta.model_dump(by_alias=True)
        assert meta == {"total": 1, "currentPage": 1, "pageSize": 10, "totalPages": 1}


class TestLeaderboardView:
    """Tests for leaderboard_view."""

    def test_min_point_filter_repositions(self, snapshot):
        page = leaderboard_view(snapshot, PageRequest.from_query(min_point="50"))
        assert [(e.position, e.name, e.total_point) for e in page.items] == [
            ("1", "Carol", 80),
            ("2", "Bob", 60),
        ]
        assert page.meta.total == 2

    def test_name_filter_case_insensitive(self, snapshot):
        page = leaderboard_view(snapshot, PageRequest.from_query(name="AL"))
        assert [e.name for e in page.items] == ["alfred", "Alice"]
        assert [e.position for e in page.items] == ["1", "2"]

    def test_sort_by_total_uses_cascade(self, snapshot):
        page = leaderboard_view(snapshot, PageRequest.from_query(sort_by="total"))
        assert [e.name for e in page.items] == ["Alice", "Bob", "Carol", "alfred"]

    def test_ascending(self, snapshot):
        page = leaderboard_view(snapshot, PageRequest.from_query(order="asc"))
        assert [e.total_point for e in page.items] == [10, 40, 60, 80]
        assert [e.position for e in page.items] == ["1", "2", "3", "4"]

    def test_pagination_after_ranking(self, snapshot):
        page = leaderboard_view(snapshot, PageRequest.from_query(page="2", limit="3"))
        assert [(e.position, e.name) for e in page.items] == [("4", "Alice")]
        assert page.meta.total_pages == 2

    def test_snapshot_is_not_mutated(self, snapshot):
        before = [(e.position, e.name) for e in snapshot]
        leaderboard_view(snapshot, PageRequest.from_query(min_point="50", order="asc"))
        assert [(e.position, e.name) for e in snapshot] == before

    def test_cached_positions_are_contiguous(self, snapshot):
        assert [e.position for e in snapshot] == ["1", "2", "3", "4"]


class TestPlayersView:
    """Tests for players_view and top_performers."""

    def test_filter_and_paginate(self):
        players = [Player(summoner_name=n) for n in ("Faker", "Caps", "fakerfan", "Rekkles")]
        page = players_view(players, q="FAKER", page=1, page_size=1)
        assert [p.summoner_name for p in page.items] == ["Faker"]
        assert page.meta.total == 2
        assert page.meta.total_pages == 2

    def test_no_filter(self):
        page = players_view([Player(summoner_name="x")])
        assert page.meta.total == 1

    def test_top_performers(self, snapshot):
        assert [e.name for e in top_performers(snapshot)] == ["Carol", "Bob", "alfred"]
        assert top_performers(()) == []


class TestLobbySearch:
    """Tests for lobby_search."""

    @pytest.fixture
    def days(self):
        def lobby(label, *names):
            return Lobby(lobby_name=label, members=[LobbyMember(name=n) for n in names])

        day1 = DayLobbies(day=1, rounds=[
            Round(round_number=1, lobbies=[lobby("Lobby 1", "Alice", ""), lobby("Lobby 2", "Bob", "Carol")]),
            Round(round_number=2, lobbies=[lobby("Lobby 1", "Bob", "Alice")]),
        ])
        day2 = DayLobbies(day=2, rounds=[Round(round_number=1, lobbies=[lobby("Lobby 1", "alice2", "Dan")])])
        return [day1, day2]

    def test_name_filter_skips_empty_seats(self, days):
        slots = lobby_search(days, name="alice")
        assert [(s.day, s.round, s.lobby, s.player) for s in slots] == [
            (1, 1, "Lobby 1", "Alice"),
            (1, 2, "Lobby 1", "Alice"),
            (2, 1, "Lobby 1", "alice2"),
        ]

    def test_round_and_lobby_filters(self, days):
        slots = lobby_search(days, round_number=1, lobby="2")
        assert [s.player for s in slots] == ["Bob", "Carol"]

    def test_empty_seats_without_name_filter(self, days):
        assert any(s.player == "" for s in lobby_search(days[:1]))

    def test_missing_days_are_skipped(self):
        assert lobby_search([None, None]) == []
