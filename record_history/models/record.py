"""Annotated run model produced by the record scan."""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .run import Run


class RecordRun(BaseModel):
    """
    A run together with the fields derived from the record history.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    run: Run
    name: Optional[str] = Field(default=None, description="Display name of the first player")
    wasRecord: bool = Field(description="Whether the run beat every earlier run")
    recordDurationDays: Optional[float] = Field(
        default=None,
        description="Days the record stood (until beaten or until now); records only",
    )
    timeFormatted: Optional[str] = Field(default=None, description="Run time as HH:MM:SS")
    dateFormatted: Optional[str] = Field(default=None, description="Run date as ISO-8601 UTC")
