"""Record service for deriving the world record history of a leaderboard."""

import logging
import time as wall_clock
from typing import Mapping, Optional, Sequence

from record_history.models import RecordRun, Run
from .format_service import format_date, format_duration

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 60 * 60 * 24


def elapsed_days(start: float, end: float) -> float:
    """Absolute distance between two epoch timestamps, in fractional days."""
    return abs(end - start) / SECONDS_PER_DAY


def scan_records(
    runs: Sequence[Run],
    players: Optional[Mapping[str, str]] = None,
    now: Optional[float] = None,
) -> list[RecordRun]:
    """
    Annotate runs with their record status and how long each record stood.

    A run is a record when no earlier run exists or its time is strictly
    lower than the current record's. Ties neither become records nor end the
    current record. A beaten record's duration runs until the date of the
    run that beat it; the last record's duration runs until ``now``.

    Args:
        runs: Runs sorted ascending by date. Not checked and not re-sorted;
            unsorted input gives meaningless durations.
        players: Player id -> name lookup for the ``name`` field
        now: Evaluation time in epoch seconds, defaults to the wall clock
            when the scan completes

    Returns:
        One RecordRun per input run, in input order
    """
    players = players or {}
    durations: dict[int, float] = {}
    flags: list[bool] = []
    holder: Optional[int] = None

    for index, run in enumerate(runs):
        if holder is None or run.time < runs[holder].time:
            if holder is not None:
                durations[holder] = elapsed_days(runs[holder].date, run.date)
            holder = index
            flags.append(True)
        else:
            flags.append(False)

    if holder is not None:
        if now is None:
            now = wall_clock.time()
        durations[holder] = elapsed_days(runs[holder].date, now)

    logger.debug(f"Scanned {len(runs)} run(s), {len(durations)} record(s)")

    return [
        RecordRun(
            run=run,
            name=players.get(run.player_id),
            wasRecord=was_record,
            recordDurationDays=durations.get(index),
            timeFormatted=format_duration(run.time),
            dateFormatted=format_date(run.date),
        )
        for index, (run, was_record) in enumerate(zip(runs, flags))
    ]
