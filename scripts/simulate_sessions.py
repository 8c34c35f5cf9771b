"""Simulate a few weeks of sessions on a default plan and print the progress.

Everything runs in memory with synthetic frame timestamps: no database, no
real clock.

Usage:
    python scripts/simulate_sessions.py
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.workout.defaults import default_plans
from app.workout.progress import plan_improvements, recent_series
from app.workout.recorder import SessionRecorder
from app.workout.scheduler import ManualFrameSource
from app.workout.stores import InMemoryLogStore
from app.workout.timer import TimerEngine, format_clock

# Reps logged on the main set, one session every other day
MAIN_SET_REPS = [118, 124, 0, 131, 135, 142, 139, 150]
FIRST_DAY = datetime.datetime(2026, 9, 1, 18, 0, tzinfo=datetime.timezone.utc)


def run_session(engine: TimerEngine, frames: ManualFrameSource, minutes: float) -> None:
    """Run the timer for *minutes*, pausing for a while half way."""
    engine.start()
    frames.emit()
    frames.advance(minutes * 30, step=5.0)
    engine.pause()
    frames.advance(120, step=5.0)  # paused: does not count
    engine.start()
    frames.emit()
    frames.advance(minutes * 30, step=5.0)


def main() -> None:
    plan = default_plans()[0]
    main_set = plan.segments[1]
    engine = TimerEngine(plan)
    frames = ManualFrameSource()
    frames.subscribe(engine.on_frame)
    recorder = SessionRecorder()
    store = InMemoryLogStore()

    print("=" * 60)
    print(f"Plan: {plan.title} ({plan.total_minutes} min)")
    print("=" * 60)
    print(f"{'day':<12} {'elapsed':>8} {'pct':>4}  {'segment':<10} {'reps':>5}")

    for day, reps in enumerate(MAIN_SET_REPS):
        minutes = 45 if day % 3 else 38
        run_session(engine, frames, minutes)
        segment = engine.current_segment()
        print(f"{(FIRST_DAY + datetime.timedelta(days=2 * day)).date()!s:<12} "
              f"{format_clock(engine.elapsed_seconds):>8} {engine.percent():>3}%  "
              f"{segment.name if segment else '-':<10} {reps:>5}")

        inputs = {main_set.id: reps, plan.segments[0].id: "", plan.segments[2].id: "300"}
        log = recorder.finish(engine.state, inputs, effort_rating=6 + day % 4, notes=None, plan_id=plan.id,
                              timestamp=FIRST_DAY + datetime.timedelta(days=2 * day), )
        store.append(log)
        engine.reset()

    print()
    print("=" * 60)
    print("PROGRESS")
    print("=" * 60)
    history = store.chronological()
    for segment_id, imp in plan_improvements(history, plan).items():
        segment = plan.segment(segment_id)
        pct = f"{imp.percent:+.1f}%" if imp.percent is not None else "n/a"
        print(f"{segment.name:<10} baseline={imp.baseline} latest={imp.latest} improvement={pct}")

    print()
    for point in recent_series(history, plan.id, limit=5):
        print(f"{point.label}  {point.duration_minutes:>3} min  RPE {point.effort_rating}")


if __name__ == "__main__":
    main()
