"""Exceptions raised by the record history pipeline."""

from typing import Any


class RecordHistoryError(Exception):
    """Base class for record history errors."""


class FetchError(RecordHistoryError):
    """
    A leaderboard page could not be fetched.

    Raised on an ``error`` payload from the API, an HTTP error status, an
    unparseable body or a transport failure. Aborts the whole run.
    """

    def __init__(self, page: int, payload: Any):
        self.page = page
        self.payload = payload
        super().__init__(f"Error fetching leaderboard page {page}: {payload}")
