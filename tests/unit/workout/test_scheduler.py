"""Tests for the frame sources."""

import asyncio

import pytest

from app.schemas.plan import Plan, Segment
from app.workout.scheduler import AsyncFrameLoop, ManualFrameSource
from app.workout.timer import TimerEngine


def _engine(minutes: int = 10) -> TimerEngine:
    return TimerEngine(Plan(id="p", title="p", segments=(Segment(id="s", duration_minutes=minutes),)))


class TestManualFrameSource:
    def test_emit_delivers_timestamp(self):
        frames = ManualFrameSource(start=5.0)
        seen = []
        frames.subscribe(seen.append)
        frames.emit()
        frames.emit(7.5)
        assert seen == [5.0, 7.5]

    def test_advance_emits_steps_and_lands_on_target(self):
        frames = ManualFrameSource()
        seen = []
        frames.subscribe(seen.append)
        frames.advance(2.5, step=1.0)
        assert seen == [1.0, 2.0, 2.5]
        assert frames.now == 2.5

    def test_advance_rejects_non_positive_step(self):
        with pytest.raises(ValueError):
            ManualFrameSource().advance(1.0, step=0)

    def test_drives_engine(self):
        engine = _engine(10)
        frames = ManualFrameSource()
        frames.subscribe(engine.on_frame)
        engine.start()
        frames.emit()
        frames.advance(90, step=0.5)
        assert engine.elapsed_seconds == pytest.approx(90.0)

    def test_drives_engine_to_clamp(self):
        engine = _engine(1)
        frames = ManualFrameSource()
        frames.subscribe(engine.on_frame)
        engine.start()
        frames.emit()
        frames.advance(3600, step=10)
        assert engine.elapsed_seconds == 60.0
        assert engine.is_running


class TestAsyncFrameLoop:
    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            AsyncFrameLoop(lambda _t: None, interval=0)

    def test_loop_delivers_clock_values(self):
        ticks = iter(range(1000))
        seen: list[float] = []

        async def _run() -> None:
            loop = AsyncFrameLoop(seen.append, interval=0.01, clock=lambda: float(next(ticks)))
            loop.start()
            assert loop.is_running
            await asyncio.sleep(0.1)
            await loop.stop()
            assert not loop.is_running

        asyncio.run(_run())
        assert len(seen) >= 2
        assert seen == sorted(seen)

    def test_loop_advances_engine(self):
        engine = _engine(10)
        fake_now = [0.0]

        def clock() -> float:
            fake_now[0] += 1.0
            return fake_now[0]

        async def _run() -> None:
            loop = AsyncFrameLoop(engine.on_frame, interval=0.01, clock=clock)
            engine.start()
            loop.start()
            await asyncio.sleep(0.1)
            await loop.stop()

        asyncio.run(_run())
        # one synthetic second per frame, the first frame only anchors
        assert engine.elapsed_seconds == fake_now[0] - 1.0
        assert engine.elapsed_seconds >= 1.0
