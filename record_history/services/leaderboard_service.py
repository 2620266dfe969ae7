"""Leaderboard service for collecting every page of a leaderboard."""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from record_history.datasources import DataSource
from record_history.models import Leaderboard, Player, Run

logger = logging.getLogger(__name__)


def build_player_lookup(players: Iterable[Player]) -> Mapping[str, str]:
    """Build a read-only player id -> name mapping."""
    return MappingProxyType({player.id: player.name for player in players})


def sort_runs(runs: Iterable[Run]) -> list[Run]:
    """
    Order runs chronologically by date.

    The sort is stable, so runs with the same date keep their fetch order.
    """
    return sorted(runs, key=lambda run: run.date)


class LeaderboardService:
    """Service for aggregating a paginated leaderboard."""

    def __init__(self, datasource: DataSource):
        self.datasource = datasource

    async def get_leaderboard(self) -> Leaderboard:
        """
        Fetch every page of the leaderboard and merge the results.

        Page 1 is fetched first since it carries the page count and the
        player list. Remaining pages are fetched one at a time; any
        FetchError propagates and stops the remaining fetches.

        Returns:
            Leaderboard with runs in fetch order and the player lookup
        """
        first_page = await self.datasource.get_leaderboard_page(1)
        pages = first_page.pagination.pages
        runs: list[Run] = list(first_page.runList)

        logger.info(
            f"Leaderboard has {pages} page(s), "
            f"{first_page.pagination.count} run(s) reported"
        )

        for page in range(2, pages + 1):
            page_data = await self.datasource.get_leaderboard_page(page)
            runs.extend(page_data.runList)
            logger.debug(f"Page {page}/{pages}: {len(page_data.runList)} run(s)")

        # Players are sent with every page; later pages repeat the same list,
        # so only the first one is used.
        players = build_player_lookup(first_page.playerList)

        logger.info(f"Fetched {len(runs)} run(s) and {len(players)} player(s)")

        return Leaderboard(runs=runs, players=players, pages=pages)
