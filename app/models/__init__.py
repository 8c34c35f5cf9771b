"""SQLModel database models."""

from app.models.plan import PlanRecord
from app.models.profile import Profile
from app.models.session_log import SessionLogRecord

__all__ = [
    "PlanRecord",
    "Profile",
    "SessionLogRecord",
]
