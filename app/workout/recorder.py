"""
Session recorder.

Turns the end state of a timed session plus what the user typed in
(metric values, effort rating, notes) into an immutable
:class:`SessionLog`.  The recorder never fails on malformed input: bad
numbers fall back to defaults so that a finished session can always be
saved.  It does not persist anything; the caller appends the log to the
store and resets the timer.
"""

from __future__ import annotations

import datetime
import math
from typing import Any, Mapping, Optional

from app.schemas.plan import Plan
from app.schemas.session_log import MetricEntry, SessionLog
from app.schemas.timer import EngineState

MIN_EFFORT = 1
MAX_EFFORT = 10


def parse_number(raw: Any) -> Optional[float]:
    """Finite float value of *raw*, or ``None`` when it is not a number."""
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def coerce_metric_value(raw: Any) -> float:
    """Numeric value of a metric input; 0 for anything unusable."""
    value = parse_number(raw)
    return 0.0 if value is None else value


def coerce_effort_rating(raw: Any, fallback: int) -> int:
    """Effort rating as an int in 1-10, *fallback* when not a number."""
    value = parse_number(raw)
    if value is None:
        value = float(fallback)
    return int(min(max(round(value), MIN_EFFORT), MAX_EFFORT))


def default_metric_inputs(plan: Plan) -> dict[str, float]:
    """Blank form values: every segment starts at 0."""
    return {segment.id: 0.0 for segment in plan.segments}


class SessionRecorder:
    """Builds session logs from finished timer sessions."""

    def __init__(self, fallback_effort: int = 5):
        self.fallback_effort = int(min(max(fallback_effort, MIN_EFFORT), MAX_EFFORT))

    def finish(self, engine_state: EngineState, metric_inputs: Optional[Mapping[str, Any]], effort_rating: Any,
               notes: Optional[str], plan_id: str, user_id: Optional[str] = None,
               timestamp: Optional[datetime.datetime] = None, ) -> SessionLog:
        entries = tuple(MetricEntry(segment_id=str(segment_id), value=coerce_metric_value(value))
                        for segment_id, value in (metric_inputs or {}).items())

        return SessionLog(user_id=_blank_to_none(user_id), plan_id=plan_id,
                          timestamp=timestamp or datetime.datetime.now(datetime.timezone.utc),
                          duration_minutes=round(engine_state.elapsed_seconds / 60),
                          effort_rating=coerce_effort_rating(effort_rating, self.fallback_effort),
                          notes=_blank_to_none(notes), metric_entries=entries, )


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None
