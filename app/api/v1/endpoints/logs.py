"""Session log endpoints (read-only; logs are created by finishing a session)."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_log_store
from app.schemas.session_log import SessionLog
from app.workout.stores import LogStore

router = APIRouter()


@router.get("", summary="List saved sessions, most recent first.", response_model=list[SessionLog], )
def list_logs(plan_id: Optional[str] = Query(None, description="Only sessions of this plan"),
              limit: Optional[int] = Query(None, ge=1, le=500, description="Maximum number of sessions"),
              logs: LogStore = Depends(get_log_store), ):
    entries = logs.load()
    if plan_id is not None:
        entries = [log for log in entries if log.plan_id == plan_id]
    if limit is not None:
        entries = entries[:limit]
    return entries
