from .base import DataSource
from .speedrun import SpeedrunDataSource, encode_request_token

__all__ = [
    "DataSource",
    "SpeedrunDataSource",
    "encode_request_token",
]
