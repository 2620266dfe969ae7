"""API routes for the record history service."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from record_history.errors import FetchError
from record_history.models import RecordRun
from record_history.services import RecordHistoryService
from .dependencies import get_history_service

router = APIRouter(prefix="/v1")


def _bad_gateway(error: FetchError) -> HTTPException:
    return HTTPException(
        status_code=502,
        detail={"page": error.page, "error": error.payload},
    )


@router.get("/records", response_model=list[dict[str, Any]])
async def get_records(
    recordsOnly: bool = Query(
        False,
        description="Only return runs that set a record"
    ),
    service: RecordHistoryService = Depends(get_history_service),
) -> list[dict[str, Any]]:
    """
    Get the leaderboard's runs in date order with their record status.

    Returns rows: date, time, wasRecord, name, recordDurationDays
    """
    try:
        return await service.get_record_rows(records_only=recordsOnly)
    except FetchError as e:
        raise _bad_gateway(e) from e


@router.get("/runs", response_model=list[RecordRun])
async def get_runs(
    service: RecordHistoryService = Depends(get_history_service),
) -> list[RecordRun]:
    """
    Get every run with its full data and all derived fields.
    """
    try:
        return await service.get_record_runs()
    except FetchError as e:
        raise _bad_gateway(e) from e
