"""Leaderboard request and response models."""

from dataclasses import dataclass
from typing import Mapping
from pydantic import BaseModel, Field, ConfigDict

from .player import Player
from .run import Run


class LeaderboardFilter(BaseModel):
    """
    Filter sent with every leaderboard page request.

    Field order matters: it is serialized as-is into the request token.
    """
    model_config = ConfigDict(populate_by_name=True)

    categoryId: str
    emulator: int = 0
    gameId: str
    obsolete: int = Field(default=1, description="1 to include obsolete (beaten) runs")
    platformIds: list[str] = Field(default_factory=list)
    regionIds: list[str] = Field(default_factory=list)
    timer: int = 0
    verified: int = 1
    values: list[str] = Field(default_factory=list)
    video: int = 0


class Pagination(BaseModel):
    """Pagination metadata returned with each page."""
    model_config = ConfigDict(populate_by_name=True)

    count: int = 0
    page: int = 1
    pages: int = 1
    per: int = 0


class LeaderboardPage(BaseModel):
    """A single successfully fetched leaderboard page."""
    model_config = ConfigDict(populate_by_name=True)

    runList: list[Run] = Field(default_factory=list)
    playerList: list[Player] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


@dataclass(frozen=True)
class Leaderboard:
    """
    All pages of a leaderboard merged together.

    ``runs`` keeps fetch order. ``players`` maps player id to name and is
    built from the first page only.
    """
    runs: list[Run]
    players: Mapping[str, str]
    pages: int
