"""
Session log schemas.

A :class:`SessionLog` is created exactly once, when a session is saved,
and is immutable afterwards.
"""

from __future__ import annotations

import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.plan import new_id


class MetricEntry(BaseModel):
    """The value recorded for one segment of a session."""

    model_config = ConfigDict(frozen=True)

    segment_id: str
    value: float = 0.0


class SessionLog(BaseModel):
    """Immutable record of one saved session."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    user_id: Optional[str] = None
    plan_id: str
    timestamp: datetime.datetime
    duration_minutes: int = Field(..., ge=0)
    effort_rating: int = Field(..., ge=1, le=10)
    notes: Optional[str] = None
    metric_entries: tuple[MetricEntry, ...] = ()

    def metric_value(self, segment_id: str) -> Optional[float]:
        """Value recorded for *segment_id*, or ``None`` if the log lacks it."""
        for entry in self.metric_entries:
            if entry.segment_id == segment_id:
                return entry.value
        return None


class SessionFinish(BaseModel):
    """Schema for saving the live session.

    Values are loose: malformed metric values and ratings are
    coerced by the recorder instead of rejecting the request.
    """

    metric_inputs: dict[str, Any] = Field(default_factory=dict,
                                          description="Segment id → recorded value", )
    effort_rating: Any = Field(None, description="Subjective effort 1-10 (RPE)")
    notes: Optional[str] = Field(None, max_length=1000)
    user_id: Optional[str] = Field(None, max_length=100, description="Display name to attach to the log")
