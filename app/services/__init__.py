"""Business logic services."""

from app.services.live_session import LiveSession
from app.services.plan_service import PlanService
from app.services.profile_service import ProfileService
from app.services.progress_service import ProgressService

__all__ = [
    "LiveSession",
    "PlanService",
    "ProfileService",
    "ProgressService",
]
