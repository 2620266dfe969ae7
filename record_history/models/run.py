"""Run model representing a single leaderboard run from speedrun.com."""

from typing import Any, Optional, Union
from pydantic import BaseModel, Field, ConfigDict


class Run(BaseModel):
    """
    Raw run data as returned by the leaderboard endpoint.

    Only ``id``, ``date`` and ``time`` drive the record history; the rest is
    passed through untouched so it can be projected into output rows.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    date: int = Field(description="Run date in seconds since epoch")
    time: Union[int, float] = Field(description="Run time in seconds (lower is better)")
    player_ids: list[str] = Field(alias="playerIds", default_factory=list)

    category_id: Optional[str] = Field(alias="categoryId", default=None)
    comment: Optional[str] = None
    date_submitted: Optional[int] = Field(alias="dateSubmitted", default=None)
    date_verified: Optional[int] = Field(alias="dateVerified", default=None)
    emulator: Optional[bool] = None
    game_id: Optional[str] = Field(alias="gameId", default=None)
    has_splits: Optional[bool] = Field(alias="hasSplits", default=None)
    issues: Optional[Any] = None
    obsolete: Optional[bool] = None
    place: Optional[int] = None
    platform_id: Optional[str] = Field(alias="platformId", default=None)
    submitted_by_id: Optional[str] = Field(alias="submittedById", default=None)
    value_ids: list[str] = Field(alias="valueIds", default_factory=list)
    verified: Optional[int] = None
    verified_by_id: Optional[str] = Field(alias="verifiedById", default=None)
    video: Optional[str] = None

    @property
    def player_id(self) -> Optional[str]:
        """Get the first credited player, if any."""
        return self.player_ids[0] if self.player_ids else None
