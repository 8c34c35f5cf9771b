"""
Timer engine state schemas.

``EngineState`` is process-local and never persisted.  ``TimerStatusResponse``
is the view the API returns for the live session: every field in it is
derived from ``EngineState`` and the selected plan on each request.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TimerStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class EngineState(BaseModel):
    """Snapshot of the timer engine."""

    model_config = ConfigDict(frozen=True)

    status: TimerStatus = TimerStatus.IDLE
    elapsed_seconds: float = Field(0.0, ge=0.0)
    total_seconds: int = Field(0, ge=0)


class ActiveSegment(BaseModel):
    """The segment the timer is currently in."""

    index: int
    segment_id: str
    name: str
    intensity: str
    start_seconds: int
    end_seconds: int
    elapsed_in_segment: float


class TimerStatusResponse(BaseModel):
    plan_id: Optional[str]
    plan_title: Optional[str]
    status: TimerStatus
    elapsed_seconds: float
    total_seconds: int
    remaining_seconds: float
    percent: int
    elapsed_display: str = Field(..., description="mm:ss")
    total_display: str = Field(..., description="mm:ss")
    current_segment: Optional[ActiveSegment]
