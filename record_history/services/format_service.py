"""Formatting of annotated runs into flat output rows."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

import pandas as pd
from tabulate import tabulate

from record_history.models import RecordRun

logger = logging.getLogger(__name__)

Row = dict[str, Any]


@dataclass(frozen=True)
class RowColumns:
    """
    Columns projected into each output row.

    ``run_columns`` are wire names of Run fields (``date``, ``time``,
    ``dateSubmitted``...). ``derived_columns`` are RecordRun fields
    (``wasRecord``, ``name``, ``recordDurationDays``, ``timeFormatted``,
    ``dateFormatted``).
    """
    run_columns: tuple[str, ...] = ("date", "time")
    derived_columns: tuple[str, ...] = ("wasRecord", "name", "recordDurationDays")

    @property
    def names(self) -> list[str]:
        """All column names in output order."""
        return [*self.run_columns, *self.derived_columns]


DEFAULT_COLUMNS = RowColumns()


def format_duration(duration_seconds: float) -> str:
    """
    Format a run time as HH:MM:SS.

    Hours are not wrapped at 24. Fractional seconds are kept
    (``1234.5`` -> ``00:20:34.5``).
    """
    # Rounded total, so the seconds field never reads 60
    total = round(duration_seconds, 3)
    hours = int(total // 3600)
    minutes = int((total % 3600) // 60)
    seconds = round(total % 60, 3)
    if float(seconds).is_integer():
        seconds = int(seconds)

    return f"{hours:02d}:{minutes:02d}:{str(seconds).zfill(2)}"


def format_date(epoch_seconds: float) -> str:
    """Format an epoch timestamp as ISO-8601 UTC, e.g. ``2023-08-22T22:05:38.000Z``."""
    moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_rows(
    record_runs: Iterable[RecordRun],
    columns: RowColumns = DEFAULT_COLUMNS,
) -> list[Row]:
    """
    Project annotated runs into flat rows.

    Every row carries every selected column; missing values are None.
    """
    rows: list[Row] = []
    for record_run in record_runs:
        run_data = record_run.run.model_dump(by_alias=True)
        row: Row = {}
        for key in columns.run_columns:
            row[key] = run_data.get(key)
        for key in columns.derived_columns:
            row[key] = getattr(record_run, key, None)
        rows.append(row)
    return rows


def write_csv(
    rows: list[Row],
    path: str,
    columns: Optional[RowColumns] = None,
) -> None:
    """
    Write rows to a CSV file with a header line.

    Args:
        rows: Rows from format_rows
        path: Destination file
        columns: Column layout; used for the header when rows is empty
    """
    header = columns.names if columns else (list(rows[0]) if rows else DEFAULT_COLUMNS.names)
    frame = pd.DataFrame(rows, columns=header)
    frame.to_csv(path, index=False)
    logger.info(f"Wrote {len(rows)} row(s) to {path}")


def rows_to_table(rows: list[Row]) -> str:
    """Render rows as a plain-text table."""
    return tabulate(rows, headers="keys", floatfmt=".2f")
