"""
Progress analytics: percent improvement per segment.

For a (plan, segment) pair the improvement compares the first and the
most recent recorded values:

    percent = 100 × (latest − baseline) / baseline

Rules
-----
1. **Order**: logs are read oldest first, in the order the store created
   them.  :meth:`LogStore.chronological` returns exactly that order.
2. **Qualifying values**: only logs of the plan that carry a value for
   the segment count.  Fewer than two values → empty result.
3. **Zero baseline**: ``percent`` is omitted, ``baseline`` and ``latest``
   are still reported.
4. **Direction**: ``higher_is_better`` never changes the sign or the size
   of the figure.  It only labels whether a positive change is good, see
   :meth:`Improvement.is_favorable`.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from app.schemas.plan import Plan
from app.schemas.progress import Improvement, SeriesPoint
from app.schemas.session_log import SessionLog


def _series(logs: Iterable[SessionLog], plan_id: str, segment_id: str) -> list[float]:
    values: list[float] = []
    for log in logs:
        if log.plan_id != plan_id:
            continue
        value = log.metric_value(segment_id)
        if value is not None:
            values.append(value)
    return values


def improvement(logs: Iterable[SessionLog], plan_id: str, segment_id: str) -> Improvement:
    """Improvement of *segment_id* in *plan_id* across *logs* (oldest first)."""
    values = _series(logs, plan_id, segment_id)
    if len(values) < 2:
        return Improvement()

    baseline = values[0]
    latest = values[-1]
    if baseline == 0:
        return Improvement(baseline=baseline, latest=latest)
    return Improvement(baseline=baseline, latest=latest, percent=100 * (latest - baseline) / baseline)


def plan_improvements(logs: Sequence[SessionLog], plan: Plan) -> dict[str, Improvement]:
    """Improvement for every segment of *plan* that defines a metric."""
    return {segment.id: improvement(logs, plan.id, segment.id) for segment in plan.segments if
            segment.metric is not None}


def recent_series(logs: Sequence[SessionLog], plan_id: str, limit: Optional[int] = 10) -> list[SeriesPoint]:
    """Duration and effort of the last *limit* sessions of a plan, oldest first."""
    mine = [log for log in logs if log.plan_id == plan_id]
    if limit is not None:
        mine = mine[-limit:] if limit > 0 else []
    return [SeriesPoint(label=log.timestamp.astimezone().date().isoformat(), timestamp=log.timestamp,
                        duration_minutes=log.duration_minutes, effort_rating=log.effort_rating, ) for log in mine]
