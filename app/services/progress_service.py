"""
Progress service.

Combines a plan with the stored session history into the per-segment
improvement figures and the recent-sessions chart series.
"""

from fastapi import HTTPException, status

from app.schemas.plan import Plan
from app.schemas.progress import Improvement, PlanProgressResponse, SegmentProgress
from app.workout.progress import improvement, plan_improvements, recent_series
from app.workout.stores import LogStore, PlanStore


class ProgressService:
    """Service for progress analytics."""

    def __init__(self, plans: PlanStore, logs: LogStore, recent_limit: int = 10):
        self.plans = plans
        self.logs = logs
        self.recent_limit = recent_limit

    def plan_progress(self, plan_id: str) -> PlanProgressResponse:
        plan = self._get_plan(plan_id)
        history = self.logs.chronological()
        improvements = plan_improvements(history, plan)

        segments = []
        for segment in plan.segments:
            if segment.metric is None:
                continue
            imp = improvements[segment.id]
            segments.append(SegmentProgress(segment_id=segment.id, name=segment.name, metric_label=segment.metric.label,
                                            higher_is_better=segment.metric.higher_is_better, improvement=imp,
                                            favorable=imp.is_favorable(segment.metric.higher_is_better), ))

        return PlanProgressResponse(plan_id=plan.id, plan_title=plan.title,
                                    session_count=sum(1 for log in history if log.plan_id == plan.id),
                                    segments=segments,
                                    recent=recent_series(history, plan.id, limit=self.recent_limit), )

    def segment_improvement(self, plan_id: str, segment_id: str) -> Improvement:
        plan = self._get_plan(plan_id)
        if plan.segment(segment_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Segment not found in plan")
        return improvement(self.logs.chronological(), plan.id, segment_id)

    def _get_plan(self, plan_id: str) -> Plan:
        plan = self.plans.get(plan_id)
        if plan is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
        return plan
