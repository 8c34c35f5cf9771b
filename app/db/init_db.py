"""
Database initialization.

Creates all tables, seeds the default plans and applies the log store
capacity to existing data.
"""

from typing import Optional

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from app.core.config import settings
from app.db.repositories.plan import PlanRepository
from app.db.repositories.session_log import SessionLogRepository
from app.workout.defaults import default_plans


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Initialize database schema and seed data.

    - Creates all SQLModel tables
    - Seeds the built-in plans when no plan exists yet
    - Trims stored session logs to ``LOG_STORE_CAPACITY``
    """
    if bind is None:
        from app.db.session import engine as bind

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(bind)

    with Session(bind) as session:
        PlanRepository(session).initialize(default_plans())
        SessionLogRepository(session, capacity=settings.LOG_STORE_CAPACITY).initialize()

    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
