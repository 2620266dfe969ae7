from .leaderboard_service import LeaderboardService, build_player_lookup, sort_runs
from .record_service import scan_records, elapsed_days
from .format_service import (
    DEFAULT_COLUMNS,
    RowColumns,
    format_rows,
    format_duration,
    format_date,
    write_csv,
    rows_to_table,
)
from .history_service import RecordHistoryService

__all__ = [
    "LeaderboardService",
    "build_player_lookup",
    "sort_runs",
    "scan_records",
    "elapsed_days",
    "DEFAULT_COLUMNS",
    "RowColumns",
    "format_rows",
    "format_duration",
    "format_date",
    "write_csv",
    "rows_to_table",
    "RecordHistoryService",
]
