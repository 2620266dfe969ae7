"""Abstract base class for data sources."""

from abc import ABC, abstractmethod

from record_history.models import LeaderboardPage


class DataSource(ABC):
    """
    Abstract interface for leaderboard data sources.

    Keeps the aggregation and record logic independent of the HTTP client,
    so tests and alternative providers can plug in their own pages.
    """

    @abstractmethod
    async def get_leaderboard_page(self, page: int) -> LeaderboardPage:
        """
        Retrieve one page of the leaderboard.

        Args:
            page: 1-based page number

        Returns:
            LeaderboardPage with the page's runs, players and pagination

        Raises:
            FetchError: If the page could not be retrieved. Implementations
                must not retry.
        """
        pass

    async def close(self) -> None:
        """
        Clean up resources (e.g., close HTTP sessions).

        Override this if the data source holds resources that need cleanup.
        """
        pass
