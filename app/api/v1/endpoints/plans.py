"""
Plan endpoints.

CRUD for workout plans.  Saving enforces the fixed session length.  Edits
and deletes of the selected plan are applied to the live session on the
event loop.
"""

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool

from app.api.dependencies import get_live_session, get_plan_store
from app.core.config import settings
from app.schemas.plan import PlanResponse, PlanWrite
from app.services.live_session import LiveSession
from app.services.plan_service import PlanService
from app.workout.stores import PlanStore

router = APIRouter()


def _service(store: PlanStore) -> PlanService:
    return PlanService(store, session_length_minutes=settings.SESSION_LENGTH_MINUTES)


@router.get("", summary="List plans.", response_model=list[PlanResponse], )
def list_plans(store: PlanStore = Depends(get_plan_store)):
    return [PlanResponse.from_plan(plan) for plan in _service(store).list_plans()]


@router.get("/draft", summary="Get an unsaved draft for a new plan.", response_model=PlanResponse, )
def get_draft(store: PlanStore = Depends(get_plan_store)):
    return PlanResponse.from_plan(_service(store).draft())


@router.post("", summary="Create a plan.", response_model=PlanResponse, status_code=status.HTTP_201_CREATED, )
def create_plan(data: PlanWrite, store: PlanStore = Depends(get_plan_store)):
    return PlanResponse.from_plan(_service(store).create(data))


@router.get("/{plan_id}", summary="Get a plan.", response_model=PlanResponse, )
def get_plan(plan_id: str, store: PlanStore = Depends(get_plan_store)):
    return PlanResponse.from_plan(_service(store).get(plan_id))


@router.put("/{plan_id}", summary="Replace a plan.", response_model=PlanResponse, )
async def update_plan(plan_id: str, data: PlanWrite, store: PlanStore = Depends(get_plan_store),
                      live: LiveSession = Depends(get_live_session), ):
    plan = await run_in_threadpool(_service(store).update, plan_id, data)
    live.plan_saved(plan)
    return PlanResponse.from_plan(plan)


@router.delete("/{plan_id}", summary="Delete a plan.", status_code=status.HTTP_204_NO_CONTENT, )
async def delete_plan(plan_id: str, store: PlanStore = Depends(get_plan_store),
                      live: LiveSession = Depends(get_live_session), ):
    await run_in_threadpool(_service(store).delete, plan_id)
    live.plan_deleted(plan_id)
