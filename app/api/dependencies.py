"""
Shared API dependencies.

Stores are built per request on the request's database session; the live
session is the single instance attached to the application state.
"""

from fastapi import Depends, Request
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.plan import PlanRepository
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.session_log import SessionLogRepository
from app.db.session import get_db
from app.services.live_session import LiveSession
from app.workout.stores import LogStore, PlanStore, ProfileStore


def get_plan_store(db: Session = Depends(get_db)) -> PlanStore:
    return PlanRepository(db)


def get_log_store(db: Session = Depends(get_db)) -> LogStore:
    return SessionLogRepository(db, capacity=settings.LOG_STORE_CAPACITY)


def get_profile_store(db: Session = Depends(get_db)) -> ProfileStore:
    return ProfileRepository(db)


def get_live_session(request: Request) -> LiveSession:
    return request.app.state.live_session
