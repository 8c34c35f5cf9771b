"""Tests for segment layout and resolution."""

import pytest

from app.schemas.plan import Segment
from app.workout.segments import layout, resolve


def _segments(*minutes: int) -> list[Segment]:
    return [Segment(id=f"s{i + 1}", duration_minutes=m) for i, m in enumerate(minutes)]


class TestLayout:
    def test_cumulative_intervals(self):
        intervals = layout(_segments(10, 30, 5))
        assert [(i.start_seconds, i.end_seconds) for i in intervals] == [(0, 600), (600, 2400), (2400, 2700)]
        assert [i.index for i in intervals] == [0, 1, 2]

    def test_empty(self):
        assert layout([]) == []

    def test_final_end_equals_total(self):
        segments = _segments(3, 7, 0, 11)
        assert layout(segments)[-1].end_seconds == sum(s.duration_seconds for s in segments)


class TestResolve:
    def test_every_second_lands_in_its_interval(self):
        intervals = layout(_segments(2, 1, 3))
        total = intervals[-1].end_seconds
        for elapsed in range(0, total):
            found = resolve(intervals, elapsed)
            assert found.start_seconds <= elapsed < found.end_seconds

    def test_total_returns_last(self):
        intervals = layout(_segments(2, 1, 3))
        assert resolve(intervals, 360).segment.id == "s3"

    def test_past_total_returns_last(self):
        intervals = layout(_segments(2, 1))
        assert resolve(intervals, 10_000).segment.id == "s2"

    @pytest.mark.parametrize("minutes", [(), (0,), (0, 0, 0)])
    def test_no_active_segment_without_duration(self, minutes):
        assert resolve(layout(_segments(*minutes)), 0) is None
