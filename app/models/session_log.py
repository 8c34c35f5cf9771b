"""
Session log database model.

Rows are append-only.  ``seq`` is the autoincrement creation order the
log store uses for "oldest first" / "most recent first" reads and for
eviction, independent of the wall-clock ``timestamp``.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


class SessionLogRecord(SQLModel, table=True):
    """A saved session."""

    __tablename__ = "session_logs"

    seq: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(nullable=False, unique=True, index=True, max_length=64)
    user_id: Optional[str] = Field(default=None, max_length=100)
    plan_id: str = Field(nullable=False, index=True, max_length=64)

    timestamp: datetime.datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    duration_minutes: int = Field(default=0, nullable=False)
    effort_rating: int = Field(default=5, nullable=False)
    notes: Optional[str] = Field(default=None, max_length=1000)

    # [{"segment_id": ..., "value": ...}, ...]
    metric_entries: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )
