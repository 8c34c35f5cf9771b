"""
Frame sources for the timer engine.

A frame source calls its subscribers with monotonically increasing
timestamps (seconds).  The engine derives elapsed time from the gap
between consecutive frames, so any source works: a real clock on the
asyncio event loop for the service, or synthetic timestamps for tests
and simulations.
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable, Optional

from loguru import logger

FrameCallback = Callable[[float], None]
Clock = Callable[[], float]


class ManualFrameSource:
    """Frame source driven by hand with synthetic timestamps."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self._subscribers: list[FrameCallback] = []

    def subscribe(self, callback: FrameCallback) -> None:
        self._subscribers.append(callback)

    def emit(self, timestamp: Optional[float] = None) -> None:
        """Deliver a frame at *timestamp* (defaults to the current time)."""
        if timestamp is not None:
            self.now = timestamp
        for callback in list(self._subscribers):
            callback(self.now)

    def advance(self, seconds: float, step: float = 1.0) -> None:
        """Move time forward by *seconds*, emitting a frame every *step*."""
        if step <= 0:
            raise ValueError("step must be > 0")
        target = self.now + seconds
        while self.now + step < target:
            self.emit(self.now + step)
        self.emit(target)


class AsyncFrameLoop:
    """Periodic frame source running as a task on the asyncio loop."""

    def __init__(self, callback: FrameCallback, interval: float = 0.25, clock: Clock = time.monotonic):
        if interval <= 0:
            raise ValueError("interval must be > 0")
        self._callback = callback
        self._interval = interval
        self._clock = clock
        self._task: Optional[asyncio.Task[None]] = None
        self._stop_event = asyncio.Event()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._run())
        logger.info(f"Frame loop started (interval={self._interval}s)")

    async def stop(self) -> None:
        if not self.is_running:
            return
        self._stop_event.set()
        assert self._task is not None
        await self._task
        self._task = None
        logger.info("Frame loop stopped")

    async def _run(self) -> None:
        while not self._stop_event.is_set():
            self._callback(self._clock())
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval)
            except asyncio.TimeoutError:
                continue
