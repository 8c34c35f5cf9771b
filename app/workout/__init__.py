"""Core session logic: timer engine, segment resolution, recorder, progress analytics."""

from app.workout.progress import improvement, plan_improvements, recent_series
from app.workout.recorder import SessionRecorder
from app.workout.timer import TimerEngine

__all__ = ["TimerEngine", "SessionRecorder", "improvement", "plan_improvements", "recent_series"]
