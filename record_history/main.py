"""Application entry points."""

import asyncio
import logging

import uvicorn

from record_history.config import Config
from record_history.app import create_app, create_datasource
from record_history.services import RecordHistoryService, rows_to_table, write_csv
from record_history.services.format_service import Row

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def execute(config: Config | None = None) -> list[Row]:
    """
    Build the record history rows for the configured leaderboard.

    Fetches every page, annotates the runs and returns the default columns.
    Raises FetchError if any page fails; no rows are produced in that case.
    """
    if config is None:
        config = Config.from_env()

    datasource = create_datasource(config)
    try:
        service = RecordHistoryService(datasource)
        return await service.get_record_rows()
    finally:
        await datasource.close()


def main():
    """Print the record history as a table."""
    _configure_logging()
    config = Config.from_env()

    rows = asyncio.run(execute(config))

    if config.csv_path:
        write_csv(rows, config.csv_path)

    print(rows_to_table(rows))


def serve():
    """Run the API server."""
    _configure_logging()
    config = Config.from_env()
    app = create_app(config)

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
    )


if __name__ == "__main__":
    main()
