"""FastAPI dependencies for dependency injection."""

from fastapi import Depends

from record_history.datasources import DataSource
from record_history.services import RecordHistoryService

# Leaderboard source shared by all requests - registered by the app lifespan
_datasource: DataSource | None = None


def set_datasource(datasource: DataSource) -> None:
    """Register the leaderboard data source used by the routes."""
    global _datasource
    _datasource = datasource


def get_datasource() -> DataSource:
    """Get the registered leaderboard data source."""
    if _datasource is None:
        raise RuntimeError("Leaderboard data source not registered. Call set_datasource() first.")
    return _datasource


def get_history_service(
    datasource: DataSource = Depends(get_datasource),
) -> RecordHistoryService:
    """Build a record history service over the registered data source."""
    return RecordHistoryService(datasource)
