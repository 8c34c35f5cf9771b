"""
Progress endpoints: per-segment improvement since the first log and the
recent-sessions series.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_log_store, get_plan_store
from app.core.config import settings
from app.schemas.progress import Improvement, PlanProgressResponse
from app.services.progress_service import ProgressService
from app.workout.stores import LogStore, PlanStore

router = APIRouter()


def _service(plans: PlanStore, logs: LogStore) -> ProgressService:
    return ProgressService(plans, logs, recent_limit=settings.RECENT_SERIES_LIMIT)


@router.get("/{plan_id}", summary="Progress of every metric segment of a plan.",
            response_model=PlanProgressResponse, )
def get_plan_progress(plan_id: str, plans: PlanStore = Depends(get_plan_store),
                      logs: LogStore = Depends(get_log_store), ):
    return _service(plans, logs).plan_progress(plan_id)


@router.get("/{plan_id}/{segment_id}", summary="Improvement of one segment.", response_model=Improvement, )
def get_segment_improvement(plan_id: str, segment_id: str, plans: PlanStore = Depends(get_plan_store),
                            logs: LogStore = Depends(get_log_store), ):
    return _service(plans, logs).segment_improvement(plan_id, segment_id)
