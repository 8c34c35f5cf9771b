"""
Progress schemas: per-segment improvement and recent-session series.

``percent`` is ``100 * (latest - baseline) / baseline`` and is only
present when there are at least two values and the baseline is non-zero.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Improvement(BaseModel):
    """Improvement of one (plan, segment) pair since its first log."""

    model_config = ConfigDict(frozen=True)

    baseline: Optional[float] = Field(None, description="Earliest recorded value")
    latest: Optional[float] = Field(None, description="Most recent recorded value")
    percent: Optional[float] = Field(None, description="Percent change from baseline to latest")

    @property
    def is_empty(self) -> bool:
        return self.baseline is None and self.latest is None and self.percent is None

    def is_favorable(self, higher_is_better: bool = True) -> Optional[bool]:
        """Whether the change reads as good news; ``None`` without a percent."""
        if self.percent is None:
            return None
        if self.percent == 0:
            return True
        return (self.percent > 0) == higher_is_better


class SeriesPoint(BaseModel):
    """One session in the recent-sessions chart."""

    label: str = Field(..., description="Local date of the session")
    timestamp: datetime.datetime
    duration_minutes: int
    effort_rating: int


class SegmentProgress(BaseModel):
    segment_id: str
    name: str
    metric_label: Optional[str]
    higher_is_better: bool
    improvement: Improvement
    favorable: Optional[bool]


class PlanProgressResponse(BaseModel):
    plan_id: str
    plan_title: str
    session_count: int
    segments: list[SegmentProgress]
    recent: list[SeriesPoint]
