"""Shared test configuration and fixtures."""
import pytest

from record_history.datasources import DataSource
from record_history.errors import FetchError
from record_history.models import LeaderboardPage, Run


def make_run(date: int, time: float, run_id: str | None = None, player: str | None = "p1") -> Run:
    """Build a minimal run."""
    return Run(
        id=run_id or f"run-{date}-{time}",
        date=date,
        time=time,
        playerIds=[player] if player else [],
    )


def make_page(
    runs: list[dict],
    players: list[dict] | None = None,
    page: int = 1,
    pages: int = 1,
) -> dict:
    """Build a raw leaderboard page payload as the API returns it."""
    return {
        "runList": runs,
        "playerList": players or [],
        "pagination": {"count": len(runs) * pages, "page": page, "pages": pages, "per": 100},
    }


class FakeDataSource(DataSource):
    """In-memory data source serving prepared page payloads."""

    def __init__(self, pages: dict[int, dict]):
        self.pages = pages
        self.requested: list[int] = []
        self.closed = False

    async def get_leaderboard_page(self, page: int) -> LeaderboardPage:
        self.requested.append(page)
        data = self.pages[page]
        if "error" in data:
            raise FetchError(page, data["error"])
        return LeaderboardPage.model_validate(data)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def reset_env(monkeypatch):
    """Clear environment variables before each test."""
    for name in (
        "HOST",
        "PORT",
        "SPEEDRUN_API_URL",
        "SPEEDRUN_GAME_ID",
        "SPEEDRUN_CATEGORY_ID",
        "SPEEDRUN_VARY",
        "REQUEST_TIMEOUT",
        "RECORD_HISTORY_CSV_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def two_page_source():
    """Two pages of runs, with the player list carried on both pages."""
    players = [
        {"id": "p1", "name": "Alice"},
        {"id": "p2", "name": "Bob"},
    ]
    return FakeDataSource({
        1: make_page(
            [
                {"id": "a", "date": 400, "time": 30, "playerIds": ["p2"]},
                {"id": "b", "date": 100, "time": 50, "playerIds": ["p1"]},
            ],
            players=players,
            pages=2,
        ),
        2: make_page(
            [
                {"id": "c", "date": 300, "time": 40, "playerIds": ["p3"]},
                {"id": "d", "date": 200, "time": 40, "playerIds": ["p1"]},
            ],
            players=players + [{"id": "p3", "name": "Carol"}],
            page=2,
            pages=2,
        ),
    })
