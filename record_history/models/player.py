"""Player reference model."""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class Player(BaseModel):
    """A runner as listed in a leaderboard page's player list."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    url: Optional[str] = None
    power_level: Optional[int] = Field(alias="powerLevel", default=None)
    color1_id: Optional[str] = Field(alias="color1Id", default=None)
    color2_id: Optional[str] = Field(alias="color2Id", default=None)
    color_animate: Optional[int] = Field(alias="colorAnimate", default=None)
    area_id: Optional[str] = Field(alias="areaId", default=None)
