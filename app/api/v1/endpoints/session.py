"""
Live session endpoints: select a plan, start/pause/reset the timer,
save or discard the session.

These handlers are ``async`` so the timer is only touched on the event
loop, the thread the frame loop advances it on.  Store access is awaited
in the threadpool by :class:`LiveSession`.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_live_session, get_log_store, get_plan_store, get_profile_store
from app.schemas.session_log import SessionFinish, SessionLog
from app.schemas.timer import TimerStatusResponse
from app.services.live_session import LiveSession
from app.workout.stores import LogStore, PlanStore, ProfileStore

router = APIRouter()


@router.get("", summary="Current timer state.", response_model=TimerStatusResponse, )
async def get_status(live: LiveSession = Depends(get_live_session), plans: PlanStore = Depends(get_plan_store), ):
    return await live.refresh(plans)


@router.post("/select/{plan_id}", summary="Select the plan to run (resets the timer).",
             response_model=TimerStatusResponse, )
async def select_plan(plan_id: str, live: LiveSession = Depends(get_live_session),
                      plans: PlanStore = Depends(get_plan_store), ):
    return await live.select(plans, plan_id)


@router.post("/start", summary="Start or resume the timer.", response_model=TimerStatusResponse, )
async def start(live: LiveSession = Depends(get_live_session), plans: PlanStore = Depends(get_plan_store), ):
    return await live.start(plans)


@router.post("/pause", summary="Pause the timer.", response_model=TimerStatusResponse, )
async def pause(live: LiveSession = Depends(get_live_session)):
    return live.pause()


@router.post("/reset", summary="Reset the timer to zero.", response_model=TimerStatusResponse, )
async def reset(live: LiveSession = Depends(get_live_session)):
    return live.reset()


@router.post("/finish", summary="Save the session and reset the timer.", response_model=SessionLog, )
async def finish(data: SessionFinish, live: LiveSession = Depends(get_live_session),
                 plans: PlanStore = Depends(get_plan_store), logs: LogStore = Depends(get_log_store),
                 profile: ProfileStore = Depends(get_profile_store), ):
    return await live.finish(plans, logs, data, profile=profile)


@router.post("/discard", summary="Discard the session without saving.", response_model=TimerStatusResponse, )
async def discard(live: LiveSession = Depends(get_live_session)):
    return live.discard()
