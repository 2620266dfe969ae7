"""Application configuration."""

import os
from dataclasses import dataclass
from typing import Optional

from record_history.models import LeaderboardFilter


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # API settings
    host: str = "0.0.0.0"
    port: int = 8000

    # speedrun.com API
    speedrun_api_url: str = "https://www.speedrun.com"
    request_timeout: float = 30.0

    # Leaderboard selection
    game_id: str = "9d35xw1l"
    category_id: str = "ndxjper2"
    # Versioning token the leaderboard endpoint expects alongside the filter
    vary: int = 1692741938

    # Optional CSV export for the CLI
    csv_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            speedrun_api_url=os.getenv(
                "SPEEDRUN_API_URL",
                "https://www.speedrun.com"
            ),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30")),
            game_id=os.getenv("SPEEDRUN_GAME_ID", "9d35xw1l"),
            category_id=os.getenv("SPEEDRUN_CATEGORY_ID", "ndxjper2"),
            vary=int(os.getenv("SPEEDRUN_VARY", "1692741938")),
            csv_path=os.getenv("RECORD_HISTORY_CSV_PATH") or None,
        )

    def leaderboard_filter(self) -> LeaderboardFilter:
        """Build the leaderboard filter for the configured game and category."""
        return LeaderboardFilter(
            categoryId=self.category_id,
            gameId=self.game_id,
        )
