"""
Model registry.

Importing this module registers every workout table on ``SQLModel.metadata``
for ``create_all`` and Alembic autogenerate.
"""

from app.models.plan import PlanRecord  # noqa: F401
from app.models.profile import Profile  # noqa: F401
from app.models.session_log import SessionLogRecord  # noqa: F401
