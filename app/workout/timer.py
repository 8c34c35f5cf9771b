"""
Session timer engine.

The engine turns a plan and a stream of clock timestamps into elapsed
time, a completion percentage and the active segment.

State machine
-------------

    Idle ──start──▶ Running ──pause──▶ Paused
      ▲               │  ▲                │
      └────reset──────┘  └─────start──────┘   (reset from any state)

There is no Completed state.  When elapsed time reaches the plan total
while Running, the engine stays Running with elapsed clamped at the total,
``percent() == 100`` and the last segment active.  Saving the session is
an explicit user action.

Elapsed time only moves through :meth:`TimerEngine.tick`, which the frame
scheduler reaches through :meth:`TimerEngine.on_frame`.  Everything else
(percent, active segment, remaining time) is recomputed from the current
state on each call.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from app.schemas.plan import Plan, Segment
from app.schemas.timer import EngineState, TimerStatus
from app.workout.segments import SegmentInterval, layout, resolve


class TimerEngine:
    """Elapsed-time tracker for one plan."""

    def __init__(self, plan: Optional[Plan] = None):
        self._plan: Optional[Plan] = None
        self._intervals: list[SegmentInterval] = []
        self._status = TimerStatus.IDLE
        self._elapsed = 0.0
        self._last_frame: Optional[float] = None
        self.select_plan(plan)

    # ------------------------------------------------------------------
    # Plan selection
    # ------------------------------------------------------------------

    @property
    def plan(self) -> Optional[Plan]:
        return self._plan

    def select_plan(self, plan: Optional[Plan]) -> None:
        """Switch to *plan*; always resets against the new total."""
        self._plan = plan
        self._intervals = layout(plan.segments) if plan is not None else []
        self.reset()

    def _log(self):
        return logger.bind(plan=self._plan.id if self._plan is not None else "-")

    @property
    def total_seconds(self) -> int:
        return self._intervals[-1].end_seconds if self._intervals else 0

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    @property
    def status(self) -> TimerStatus:
        return self._status

    @property
    def elapsed_seconds(self) -> float:
        return self._elapsed

    @property
    def is_running(self) -> bool:
        return self._status is TimerStatus.RUNNING

    def start(self) -> None:
        if self._status is TimerStatus.RUNNING:
            return
        self._status = TimerStatus.RUNNING
        # The first frame after a start only anchors the clock.
        self._last_frame = None
        self._log().debug(f"Timer started at {self._elapsed:.1f}s of {self.total_seconds}s")

    def pause(self) -> None:
        if self._status is not TimerStatus.RUNNING:
            return
        self._status = TimerStatus.PAUSED
        self._last_frame = None
        self._log().debug(f"Timer paused at {self._elapsed:.1f}s")

    def reset(self) -> None:
        self._status = TimerStatus.IDLE
        self._elapsed = 0.0
        self._last_frame = None

    # ------------------------------------------------------------------
    # Advancement
    # ------------------------------------------------------------------

    def tick(self, delta_seconds: float) -> None:
        """Advance elapsed time by *delta_seconds* while Running.

        Negative deltas are treated as zero; elapsed time never exceeds the
        plan total.
        """
        if self._status is not TimerStatus.RUNNING:
            return
        delta = max(0.0, float(delta_seconds))
        self._elapsed = min(self._elapsed + delta, float(self.total_seconds))

    def on_frame(self, timestamp: float) -> None:
        """Frame callback: advance by the time since the previous frame."""
        if self._status is not TimerStatus.RUNNING:
            self._last_frame = None
            return
        previous = self._last_frame
        self._last_frame = timestamp
        if previous is None:
            return
        self.tick(max(0.0, timestamp - previous))

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def state(self) -> EngineState:
        return EngineState(status=self._status, elapsed_seconds=self._elapsed, total_seconds=self.total_seconds)

    def percent(self) -> int:
        total = self.total_seconds
        if total == 0:
            return 0
        return round(100 * self._elapsed / total)

    def remaining_seconds(self) -> float:
        return max(0.0, self.total_seconds - self._elapsed)

    def current_interval(self) -> Optional[SegmentInterval]:
        return resolve(self._intervals, self._elapsed)

    def current_segment(self) -> Optional[Segment]:
        interval = self.current_interval()
        return interval.segment if interval is not None else None

    def segment_progress(self) -> float:
        """Seconds spent inside the active segment, capped at its length."""
        interval = self.current_interval()
        if interval is None:
            return 0.0
        return min(max(0.0, self._elapsed - interval.start_seconds),
                   float(interval.end_seconds - interval.start_seconds))


def format_clock(seconds: float) -> str:
    """``mm:ss`` rendering used by the session view."""
    whole = int(max(0.0, seconds))
    return f"{whole // 60:02d}:{whole % 60:02d}"
