"""Tests for the live session controller with in-memory stores."""

import asyncio
import threading

import pytest
from fastapi import HTTPException

from app.schemas.plan import PlanWrite, Segment
from app.schemas.session_log import SessionFinish
from app.schemas.timer import TimerStatus
from app.services.live_session import LiveSession
from app.services.plan_service import PlanService
from app.services.progress_service import ProgressService
from app.workout.defaults import default_plans
from app.workout.scheduler import ManualFrameSource
from app.workout.stores import InMemoryLogStore, InMemoryPlanStore, InMemoryProfileStore

run = asyncio.run


@pytest.fixture()
def plans():
    store = InMemoryPlanStore()
    store.initialize(default_plans())
    return store


@pytest.fixture()
def live():
    return LiveSession()


@pytest.fixture()
def frames(live):
    source = ManualFrameSource()
    source.subscribe(live.on_frame)
    return source


class TestControls:
    def test_first_plan_selected_by_default(self, live, plans):
        status = run(live.refresh(plans))
        assert status.plan_id == plans.load()[0].id
        assert status.total_seconds == 2700
        assert status.total_display == "45:00"
        assert status.current_segment.name == "Warmup"

    def test_start_pause_reset(self, live, plans, frames):
        run(live.start(plans))
        frames.emit()
        frames.advance(125)
        status = live.pause()
        assert status.status is TimerStatus.PAUSED
        assert status.elapsed_seconds == pytest.approx(125)
        assert status.elapsed_display == "02:05"

        frames.advance(60)
        assert live.status().elapsed_seconds == pytest.approx(125)

        status = live.reset()
        assert status.status is TimerStatus.IDLE
        assert status.elapsed_seconds == 0

    def test_select_unknown_plan(self, live, plans):
        with pytest.raises(HTTPException) as exc:
            run(live.select(plans, "missing"))
        assert exc.value.status_code == 404

    def test_select_resets_running_timer(self, live, plans, frames):
        first, second = plans.load()
        run(live.select(plans, first.id))
        run(live.start(plans))
        frames.emit()
        frames.advance(300)

        status = run(live.select(plans, second.id))

        assert status.plan_id == second.id
        assert status.status is TimerStatus.IDLE
        assert status.elapsed_seconds == 0
        assert status.current_segment.segment_id == second.segments[0].id

    def test_no_plans(self, live):
        with pytest.raises(HTTPException) as exc:
            run(live.start(InMemoryPlanStore()))
        assert exc.value.status_code == 404

    def test_status_at_end(self, live, plans, frames):
        run(live.start(plans))
        frames.emit()
        frames.advance(3000, step=30)
        status = live.status()
        assert status.status is TimerStatus.RUNNING
        assert status.percent == 100
        assert status.remaining_seconds == 0
        assert status.current_segment.name == "Cooldown"
        assert status.current_segment.elapsed_in_segment == 300


class TestPlanChanges:
    @staticmethod
    def _edit(minutes=(5, 40)):
        return PlanWrite(title="Edited", segments=[Segment(id=f"e{i}", name=f"Edit {i}", duration_minutes=m)
                                                   for i, m in enumerate(minutes)])

    def test_edit_of_selected_plan_replaces_running_copy(self, live, plans, frames):
        target = plans.load()[0]
        run(live.select(plans, target.id))
        run(live.start(plans))
        frames.emit()
        frames.advance(120)

        live.plan_saved(PlanService(plans).update(target.id, self._edit()))

        status = live.status()
        assert status.plan_title == "Edited"
        assert status.status is TimerStatus.IDLE
        assert status.elapsed_seconds == 0
        assert status.current_segment.segment_id == "e0"

    def test_edit_of_other_plan_keeps_timer(self, live, plans, frames):
        first, second = plans.load()
        run(live.select(plans, first.id))
        run(live.start(plans))
        frames.emit()
        frames.advance(60)

        live.plan_saved(PlanService(plans).update(second.id, self._edit()))

        assert live.status().plan_id == first.id
        assert live.status().elapsed_seconds == pytest.approx(60)

    def test_edit_picked_up_from_store(self, live, plans):
        target = plans.load()[0]
        run(live.select(plans, target.id))
        PlanService(plans).update(target.id, self._edit())

        assert run(live.refresh(plans)).plan_title == "Edited"

    def test_deleted_plan_falls_back_to_first(self, live, plans):
        first, second = plans.load()
        run(live.select(plans, first.id))
        PlanService(plans).delete(first.id)
        live.plan_deleted(first.id)

        assert live.status().plan_id is None
        log = run(live.finish(plans, InMemoryLogStore(), SessionFinish()))
        assert log.plan_id == second.id

    def test_deleted_plan_dropped_on_refresh(self, live, plans):
        first, second = plans.load()
        run(live.select(plans, first.id))
        PlanService(plans).delete(first.id)

        assert run(live.refresh(plans)).plan_id == second.id


class _ThreadRecordingLogs(InMemoryLogStore):
    def __init__(self):
        super().__init__()
        self.threads = set()

    def append(self, log):
        self.threads.add(threading.get_ident())
        return super().append(log)


class _ThreadRecordingPlans(InMemoryPlanStore):
    def __init__(self):
        super().__init__()
        self.threads = set()

    def load(self):
        self.threads.add(threading.get_ident())
        return super().load()


def test_store_calls_leave_the_event_loop_thread():
    plans = _ThreadRecordingPlans()
    plans.initialize(default_plans())
    logs = _ThreadRecordingLogs()
    live = LiveSession()

    async def _finish():
        loop_thread = threading.get_ident()
        await live.start(plans)
        await live.finish(plans, logs, SessionFinish())
        return loop_thread

    loop_thread = run(_finish())

    assert plans.threads and loop_thread not in plans.threads
    assert logs.threads and loop_thread not in logs.threads


class TestFinish:
    def test_finish_appends_and_resets(self, live, plans, frames):
        logs = InMemoryLogStore()
        plan = plans.load()[0]
        run(live.start(plans))
        frames.emit()
        frames.advance(1200, step=10)

        data = SessionFinish(metric_inputs={s.id: v for s, v in zip(plan.segments, ["60", 120, "x"])},
                             effort_rating="7", notes="ok")
        log = run(live.finish(plans, logs, data))

        assert log.duration_minutes == 20
        assert log.effort_rating == 7
        assert [e.value for e in log.metric_entries] == [60.0, 120.0, 0.0]
        assert logs.load() == [log]
        assert live.status().status is TimerStatus.IDLE
        assert live.status().elapsed_seconds == 0

    def test_missing_segments_default_to_zero(self, live, plans):
        plan = plans.load()[0]
        main = plan.segments[1].id
        data = SessionFinish(metric_inputs={main: 140, "not-a-segment": 9})

        log = run(live.finish(plans, InMemoryLogStore(), data))

        assert [(e.segment_id, e.value) for e in log.metric_entries] == [
            (plan.segments[0].id, 0.0), (main, 140.0), (plan.segments[2].id, 0.0)]

    def test_display_name_used_when_no_user(self, live, plans):
        logs = InMemoryLogStore()
        profile = InMemoryProfileStore("Jordan A.")
        log = run(live.finish(plans, logs, SessionFinish(), profile=profile))
        assert log.user_id == "Jordan A."
        assert log.effort_rating == 5

    def test_discard_does_not_save(self, live, plans, frames):
        logs = InMemoryLogStore()
        run(live.start(plans))
        frames.emit()
        frames.advance(100)
        status = live.discard()
        assert status.elapsed_seconds == 0
        assert logs.load() == []

    def test_progress_after_sessions(self, live, plans):
        logs = InMemoryLogStore()
        plan = plans.load()[0]
        main = plan.segments[1]
        for reps in (100, 90, 125):
            run(live.finish(plans, logs, SessionFinish(metric_inputs={main.id: reps}, effort_rating=6)))

        progress = ProgressService(plans, logs).plan_progress(plan.id)

        assert progress.session_count == 3
        by_id = {s.segment_id: s for s in progress.segments}
        assert by_id[main.id].improvement.percent == pytest.approx(25.0)
        assert by_id[main.id].favorable is True
        warmup = by_id[plan.segments[0].id].improvement
        assert (warmup.baseline, warmup.latest, warmup.percent) == (0.0, 0.0, None)
        assert len(progress.recent) == 3
