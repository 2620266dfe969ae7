"""Tests for leaderboard aggregation and sorting."""

import pytest

from conftest import FakeDataSource, make_page, make_run
from record_history.errors import FetchError
from record_history.models import Player
from record_history.services.leaderboard_service import (
    LeaderboardService,
    build_player_lookup,
    sort_runs,
)


class TestGetLeaderboard:
    """Test LeaderboardService.get_leaderboard()."""

    @pytest.mark.asyncio
    async def test_single_page_fetches_once(self):
        source = FakeDataSource({
            1: make_page([{"id": "a", "date": 1, "time": 5}], pages=1),
        })

        leaderboard = await LeaderboardService(source).get_leaderboard()

        assert source.requested == [1]
        assert leaderboard.pages == 1
        assert [r.id for r in leaderboard.runs] == ["a"]

    @pytest.mark.asyncio
    async def test_concatenates_pages_in_fetch_order(self, two_page_source):
        leaderboard = await LeaderboardService(two_page_source).get_leaderboard()

        assert two_page_source.requested == [1, 2]
        assert [r.id for r in leaderboard.runs] == ["a", "b", "c", "d"]

    @pytest.mark.asyncio
    async def test_players_come_from_first_page_only(self, two_page_source):
        leaderboard = await LeaderboardService(two_page_source).get_leaderboard()

        assert dict(leaderboard.players) == {"p1": "Alice", "p2": "Bob"}
        assert "p3" not in leaderboard.players

    @pytest.mark.asyncio
    async def test_error_on_page_two_aborts(self):
        source = FakeDataSource({
            1: make_page([{"id": "a", "date": 1, "time": 5}], pages=3),
            2: {"error": "Invalid request"},
            3: make_page([{"id": "c", "date": 3, "time": 4}], page=3, pages=3),
        })

        with pytest.raises(FetchError) as exc_info:
            await LeaderboardService(source).get_leaderboard()

        assert exc_info.value.page == 2
        assert exc_info.value.payload == "Invalid request"
        assert source.requested == [1, 2]

    @pytest.mark.asyncio
    async def test_error_on_first_page_aborts(self):
        source = FakeDataSource({1: {"error": {"message": "down"}}})

        with pytest.raises(FetchError) as exc_info:
            await LeaderboardService(source).get_leaderboard()

        assert exc_info.value.page == 1
        assert source.requested == [1]


class TestBuildPlayerLookup:
    """Test build_player_lookup()."""

    def test_maps_id_to_name(self):
        lookup = build_player_lookup([
            Player(id="p1", name="Alice"),
            Player(id="p2", name="Bob"),
        ])

        assert lookup["p1"] == "Alice"
        assert lookup.get("missing") is None

    def test_is_read_only(self):
        lookup = build_player_lookup([Player(id="p1", name="Alice")])

        with pytest.raises(TypeError):
            lookup["p2"] = "Bob"


class TestSortRuns:
    """Test sort_runs()."""

    def test_sorts_ascending_by_date(self):
        runs = [make_run(300, 1), make_run(100, 2), make_run(200, 3)]

        assert [r.date for r in sort_runs(runs)] == [100, 200, 300]

    def test_equal_dates_keep_fetch_order(self):
        runs = [
            make_run(200, 1, run_id="x"),
            make_run(100, 2, run_id="y"),
            make_run(200, 3, run_id="z"),
        ]

        assert [r.id for r in sort_runs(runs)] == ["y", "x", "z"]

    def test_returns_new_list(self):
        runs = [make_run(300, 1), make_run(100, 2)]

        sort_runs(runs)

        assert [r.date for r in runs] == [300, 100]
