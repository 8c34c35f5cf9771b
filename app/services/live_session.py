"""
Live session controller.

Owns the one :class:`TimerEngine` of the process and runs the end of a
session: build the log with :class:`SessionRecorder`, append it to the
log store, reset the timer.

The engine is only mutated on the thread that delivers frames (the
asyncio event loop in the service).  Store reads and writes are blocking,
so the coroutines below hand them to the threadpool and touch the engine
only after the await returns.

The selected plan follows the stored plan list: an edited plan replaces
the running copy (and resets the timer), a deleted one falls back to the
first stored plan.
"""

from typing import Optional, Sequence

from fastapi import HTTPException, status
from fastapi.concurrency import run_in_threadpool
from loguru import logger

from app.schemas.plan import Plan
from app.schemas.session_log import SessionFinish, SessionLog
from app.schemas.timer import ActiveSegment, TimerStatusResponse
from app.workout.recorder import SessionRecorder, default_metric_inputs
from app.workout.stores import LogStore, PlanStore, ProfileStore
from app.workout.timer import TimerEngine, format_clock


class LiveSession:
    """The session currently on screen."""

    def __init__(self, recorder: Optional[SessionRecorder] = None):
        self.engine = TimerEngine()
        self.recorder = recorder or SessionRecorder()

    def on_frame(self, timestamp: float) -> None:
        self.engine.on_frame(timestamp)

    @property
    def plan_id(self) -> Optional[str]:
        return self.engine.plan.id if self.engine.plan is not None else None

    # ------------------------------------------------------------------
    # Plan selection
    # ------------------------------------------------------------------

    async def select(self, plans: PlanStore, plan_id: str) -> TimerStatusResponse:
        plan = await run_in_threadpool(plans.get, plan_id)
        if plan is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
        self._select(plan)
        return self.status()

    async def ensure_plan(self, plans: PlanStore) -> Plan:
        """Selected plan as currently stored, falling back to the first stored plan."""
        return self.sync(await run_in_threadpool(plans.load))

    def sync(self, available: Sequence[Plan]) -> Plan:
        """Re-derive the selection from *available*, the stored plans in list order."""
        current = self.engine.plan
        if current is not None:
            stored = next((plan for plan in available if plan.id == current.id), None)
            if stored is not None:
                if stored != current:
                    self.plan_saved(stored)
                return stored
            self.plan_deleted(current.id)
        if not available:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No plans available")
        self._select(available[0])
        return available[0]

    def plan_saved(self, plan: Plan) -> None:
        """Pick up an edit to the selected plan."""
        if self.plan_id == plan.id and self.engine.plan != plan:
            logger.bind(plan=plan.id).info("Selected plan was edited, timer reset")
            self.engine.select_plan(plan)

    def plan_deleted(self, plan_id: str) -> None:
        """Drop the selection when its plan is gone."""
        if self.plan_id == plan_id:
            logger.bind(plan=plan_id).info("Selected plan was deleted, timer reset")
            self.engine.select_plan(None)

    def _select(self, plan: Plan) -> None:
        if self.engine.plan is not None and self.engine.plan.id != plan.id:
            logger.info(f"Switching plan {self.engine.plan.id} -> {plan.id}, timer reset")
        self.engine.select_plan(plan)

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    async def refresh(self, plans: PlanStore) -> TimerStatusResponse:
        await self.ensure_plan(plans)
        return self.status()

    async def start(self, plans: PlanStore) -> TimerStatusResponse:
        await self.ensure_plan(plans)
        self.engine.start()
        return self.status()

    def pause(self) -> TimerStatusResponse:
        self.engine.pause()
        return self.status()

    def reset(self) -> TimerStatusResponse:
        self.engine.reset()
        return self.status()

    def discard(self) -> TimerStatusResponse:
        """Drop the running session without saving it."""
        logger.bind(plan=self.plan_id or "-").info(f"Session discarded at {self.engine.elapsed_seconds:.0f}s")
        return self.reset()

    async def finish(self, plans: PlanStore, logs: LogStore, data: SessionFinish,
                     profile: Optional[ProfileStore] = None, ) -> SessionLog:
        plan = await self.ensure_plan(plans)
        user_id = data.user_id
        if not user_id and profile is not None:
            user_id = await run_in_threadpool(profile.get_display_name)

        # Every segment gets an entry; values for unknown segment ids are dropped.
        inputs = default_metric_inputs(plan)
        inputs.update((key, value) for key, value in data.metric_inputs.items() if key in inputs)

        log = self.recorder.finish(self.engine.state, inputs, data.effort_rating, data.notes, plan_id=plan.id,
                                   user_id=user_id, )
        await run_in_threadpool(logs.append, log)
        self.engine.reset()
        logger.bind(plan=plan.id).info(f"Saved session {log.id}: {log.duration_minutes} min, "
                                       f"effort {log.effort_rating}")
        return log

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def status(self) -> TimerStatusResponse:
        engine = self.engine
        interval = engine.current_interval()
        current = None
        if interval is not None:
            current = ActiveSegment(index=interval.index, segment_id=interval.segment.id, name=interval.segment.name,
                                    intensity=interval.segment.intensity.value,
                                    start_seconds=interval.start_seconds, end_seconds=interval.end_seconds,
                                    elapsed_in_segment=engine.segment_progress(), )
        plan = engine.plan
        return TimerStatusResponse(plan_id=plan.id if plan else None, plan_title=plan.title if plan else None,
                                   status=engine.status, elapsed_seconds=engine.elapsed_seconds,
                                   total_seconds=engine.total_seconds, remaining_seconds=engine.remaining_seconds(),
                                   percent=engine.percent(), elapsed_display=format_clock(engine.elapsed_seconds),
                                   total_display=format_clock(engine.total_seconds), current_segment=current, )
