from .run import Run
from .player import Player
from .leaderboard import (
    LeaderboardFilter,
    Pagination,
    LeaderboardPage,
    Leaderboard,
)
from .record import RecordRun

__all__ = [
    "Run",
    "Player",
    "LeaderboardFilter",
    "Pagination",
    "LeaderboardPage",
    "Leaderboard",
    "RecordRun",
]
