"""Database repositories."""

from app.db.repositories.plan import PlanRepository
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.session_log import SessionLogRepository

__all__ = [
    "PlanRepository",
    "ProfileRepository",
    "SessionLogRepository",
]
