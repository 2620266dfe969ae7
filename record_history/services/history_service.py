"""Record history service tying fetching, scanning and formatting together."""

import logging
from typing import Optional

from record_history.datasources import DataSource
from record_history.models import RecordRun
from .format_service import DEFAULT_COLUMNS, Row, RowColumns, format_rows
from .leaderboard_service import LeaderboardService, sort_runs
from .record_service import scan_records

logger = logging.getLogger(__name__)


class RecordHistoryService:
    """Service for building the record history of a leaderboard."""

    def __init__(self, datasource: DataSource):
        self.datasource = datasource
        self.leaderboard_service = LeaderboardService(datasource)

    async def get_record_runs(self, now: Optional[float] = None) -> list[RecordRun]:
        """
        Fetch the whole leaderboard and annotate every run chronologically.

        Args:
            now: Evaluation time for the standing record, defaults to the wall clock

        Returns:
            RecordRun list sorted by run date
        """
        leaderboard = await self.leaderboard_service.get_leaderboard()
        runs = sort_runs(leaderboard.runs)
        record_runs = scan_records(runs, players=leaderboard.players, now=now)

        record_count = sum(1 for r in record_runs if r.wasRecord)
        logger.info(f"Found {record_count} record(s) among {len(record_runs)} run(s)")

        return record_runs

    async def get_records(self, now: Optional[float] = None) -> list[RecordRun]:
        """Get only the runs that set a record, oldest first."""
        record_runs = await self.get_record_runs(now=now)
        return [r for r in record_runs if r.wasRecord]

    async def get_record_rows(
        self,
        columns: RowColumns = DEFAULT_COLUMNS,
        records_only: bool = False,
        now: Optional[float] = None,
    ) -> list[Row]:
        """
        Build the output rows.

        Args:
            columns: Columns to project
            records_only: If True, only include runs that set a record
            now: Evaluation time for the standing record

        Returns:
            One flat row per run (or per record)
        """
        if records_only:
            record_runs = await self.get_records(now=now)
        else:
            record_runs = await self.get_record_runs(now=now)
        return format_rows(record_runs, columns)
