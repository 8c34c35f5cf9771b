"""Pydantic schemas for domain values and request/response validation."""

from app.schemas.plan import Intensity, MetricDefinition, MetricKind, Plan, PlanResponse, PlanWrite, Segment
from app.schemas.profile import ProfileResponse, ProfileUpdate
from app.schemas.progress import Improvement, PlanProgressResponse, SegmentProgress, SeriesPoint
from app.schemas.session_log import MetricEntry, SessionFinish, SessionLog
from app.schemas.timer import ActiveSegment, EngineState, TimerStatus, TimerStatusResponse

__all__ = [
    "Intensity",
    "MetricDefinition",
    "MetricKind",
    "Plan",
    "PlanResponse",
    "PlanWrite",
    "Segment",
    "ProfileResponse",
    "ProfileUpdate",
    "Improvement",
    "PlanProgressResponse",
    "SegmentProgress",
    "SeriesPoint",
    "MetricEntry",
    "SessionFinish",
    "SessionLog",
    "ActiveSegment",
    "EngineState",
    "TimerStatus",
    "TimerStatusResponse",
]
