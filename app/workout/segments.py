"""
Segment layout and resolution.

Segments are laid out back to back in declaration order as half-open
second intervals ``[start, start + duration)``.  Zero-length segments
occupy an empty interval and are never active unless they are the last
segment and the timer has reached the end of the plan.
"""

from __future__ import annotations

from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict

from app.schemas.plan import Segment


class SegmentInterval(BaseModel):
    """A segment together with its position on the session timeline."""

    model_config = ConfigDict(frozen=True)

    index: int
    segment: Segment
    start_seconds: int
    end_seconds: int

    def contains(self, elapsed_seconds: float) -> bool:
        return self.start_seconds <= elapsed_seconds < self.end_seconds


def layout(segments: Sequence[Segment]) -> list[SegmentInterval]:
    """Cumulative intervals for *segments*, in seconds."""
    intervals: list[SegmentInterval] = []
    cursor = 0
    for index, segment in enumerate(segments):
        end = cursor + segment.duration_seconds
        intervals.append(SegmentInterval(index=index, segment=segment, start_seconds=cursor, end_seconds=end))
        cursor = end
    return intervals


def resolve(intervals: Sequence[SegmentInterval], elapsed_seconds: float) -> Optional[SegmentInterval]:
    """Return the interval active at *elapsed_seconds*.

    The first interval containing the elapsed time wins.  At or past the
    end of the final interval the last one is returned.  A timeline with no
    intervals, or one whose total length is zero, has no active interval.
    """
    if not intervals or intervals[-1].end_seconds == 0:
        return None
    for interval in intervals:
        if interval.contains(elapsed_seconds):
            return interval
    return intervals[-1]
