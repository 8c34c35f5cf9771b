"""
Workout plan schemas.

A plan is an ordered list of timed segments.  Segment ids are opaque
strings that stay stable while the plan is edited, so that session logs
recorded against an older version of a plan still line up with its
segments.

The total duration of a plan is always derived from its segments; the
fixed session length is only checked at the authoring boundary
(:class:`app.services.plan_service.PlanService`).
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def new_id() -> str:
    """Return a short opaque identifier."""
    return uuid.uuid4().hex[:8]


class Intensity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class MetricKind(str, Enum):
    COUNTED = "counted"
    TIMED = "timed"
    DISTANCE = "distance"
    CUSTOM = "custom"


class MetricDefinition(BaseModel):
    """What is measured for a segment.

    ``higher_is_better`` is presentation metadata: it tells a reader
    whether a positive improvement is good news.  It never changes the
    computed improvement.
    """

    model_config = ConfigDict(frozen=True)

    kind: MetricKind = Field(MetricKind.COUNTED, description="Kind of value recorded for the segment")
    label: Optional[str] = Field(None, max_length=100, description="Display label, e.g. 'Total Reps'")
    higher_is_better: bool = Field(True, description="Whether a larger value is an improvement")


class Segment(BaseModel):
    """One timed, intensity-tagged part of a session."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id, min_length=1, max_length=64)
    name: str = Field("New Block", max_length=100)
    duration_minutes: int = Field(..., ge=0, le=600)
    intensity: Intensity = Intensity.MODERATE
    metric: Optional[MetricDefinition] = None
    target_value: Optional[float] = None
    notes: Optional[str] = Field(None, max_length=1000)

    @property
    def duration_seconds(self) -> int:
        return self.duration_minutes * 60


class Plan(BaseModel):
    """An ordered set of segments forming one session template."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id, min_length=1, max_length=64)
    title: str = Field(..., min_length=1, max_length=200)
    tags: tuple[str, ...] = ()
    segments: tuple[Segment, ...] = ()
    author: str = Field("You", max_length=200)

    @field_validator("tags", mode="before")
    @classmethod
    def _normalise_tags(cls, value):
        """Tags behave as a set: trimmed, blanks dropped, first occurrence kept."""
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        seen: list[str] = []
        for raw in value:
            tag = str(raw).strip()
            if tag and tag not in seen:
                seen.append(tag)
        return tuple(seen)

    @field_validator("segments")
    @classmethod
    def _unique_segment_ids(cls, value: tuple[Segment, ...]) -> tuple[Segment, ...]:
        ids = [segment.id for segment in value]
        if len(ids) != len(set(ids)):
            raise ValueError("Segment ids must be unique within a plan")
        return value

    @property
    def total_minutes(self) -> int:
        return sum(segment.duration_minutes for segment in self.segments)

    @property
    def total_seconds(self) -> int:
        return self.total_minutes * 60

    def segment(self, segment_id: str) -> Optional[Segment]:
        return next((s for s in self.segments if s.id == segment_id), None)


class PlanWrite(BaseModel):
    """Schema for creating or replacing a plan through the API."""

    title: str = Field(..., min_length=1, max_length=200)
    tags: list[str] = Field(default_factory=list)
    segments: list[Segment] = Field(default_factory=list)
    author: str = Field("You", max_length=200)


class PlanResponse(BaseModel):
    """Schema for a plan in API responses."""

    id: str
    title: str
    tags: list[str]
    segments: list[Segment]
    author: str
    total_minutes: int

    @classmethod
    def from_plan(cls, plan: Plan) -> PlanResponse:
        return cls(id=plan.id, title=plan.title, tags=list(plan.tags), segments=list(plan.segments),
                   author=plan.author, total_minutes=plan.total_minutes, )
