"""speedrun.com leaderboard API data source implementation."""

import base64
import json
import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from record_history.errors import FetchError
from record_history.models import LeaderboardFilter, LeaderboardPage
from .base import DataSource

logger = logging.getLogger(__name__)

# API constants
SPEEDRUN_API_URL = "https://www.speedrun.com"
LEADERBOARD_ENDPOINT = "/api/v2/GetGameLeaderboard2"
DEFAULT_VARY = 1692741938
REQUEST_TIMEOUT = 30.0


def encode_request_token(payload: dict) -> str:
    """
    Encode request parameters the way the leaderboard endpoint expects them.

    Compact JSON, base64 encoded, with the trailing ``=`` padding removed
    (the endpoint rejects padded tokens).
    """
    raw = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    return base64.b64encode(raw).decode("ascii").rstrip("=")


class SpeedrunDataSource(DataSource):
    """
    Data source implementation using the speedrun.com v2 leaderboard API.

    Limitations:
    - One request per page, issued sequentially by the caller
    - No retries: the first failure raises FetchError
    """

    def __init__(
        self,
        leaderboard_filter: LeaderboardFilter,
        api_url: str = SPEEDRUN_API_URL,
        vary: int = DEFAULT_VARY,
        timeout: float = REQUEST_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the speedrun.com data source.

        Args:
            leaderboard_filter: Game, category and run filters sent with every page
            api_url: Base URL for the speedrun.com API
            vary: Versioning token sent alongside the filter
            timeout: Request timeout in seconds
            client: Optional preconfigured HTTP client (closed by close())
        """
        self.leaderboard_filter = leaderboard_filter
        self.api_url = api_url
        self.vary = vary
        self.timeout = timeout
        self._client = client

    def build_request_params(self, page: int) -> dict:
        """Build the un-encoded request parameters for a page."""
        return {
            "params": self.leaderboard_filter.model_dump(),
            "page": page,
            "vary": self.vary,
        }

    async def _make_request(self, page: int) -> Any:
        """
        Request one page and return the decoded JSON body.

        Transport failures, HTTP error statuses and non-JSON bodies are all
        reported as FetchError for the page.
        """
        client = await self._get_client()
        token = encode_request_token(self.build_request_params(page))

        try:
            response = await client.get(
                LEADERBOARD_ENDPOINT,
                params={"_r": token},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.error(f"Request for page {page} failed: {e}")
            raise FetchError(page, f"{type(e).__name__}: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(
                f"Page {page} returned a non-JSON body (HTTP {response.status_code})"
            )
            raise FetchError(page, f"HTTP {response.status_code}: invalid JSON body") from e

        if isinstance(data, dict) and "error" in data:
            logger.error(f"Page {page} returned an error: {data['error']}")
            logger.debug(f"Request params for page {page}: {self.build_request_params(page)}")
            raise FetchError(page, data["error"])

        if response.is_error:
            logger.error(f"HTTP error {response.status_code} for page {page}")
            raise FetchError(page, f"HTTP {response.status_code}")

        return data

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.api_url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        return self._client

    async def get_leaderboard_page(self, page: int) -> LeaderboardPage:
        """
        Retrieve one page of the leaderboard.

        The response is either ``{runList, playerList, pagination}`` or
        ``{error}``; the latter raises FetchError.
        """
        if page < 1:
            raise ValueError(f"Page numbers start at 1, got {page}")

        logger.debug(f"Fetching leaderboard page {page}")
        data = await self._make_request(page)

        try:
            return LeaderboardPage.model_validate(data)
        except ValidationError as e:
            logger.error(f"Page {page} has an unexpected shape: {e}")
            raise FetchError(page, f"Unexpected response shape: {e}") from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
