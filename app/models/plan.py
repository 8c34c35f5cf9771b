"""
Workout plan database model.

Segments and tags are stored as JSON on the plan row: a plan is always
read and written as a whole, and segment ids only need to be unique
within their plan.
"""

import datetime

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class PlanRecord(SQLModel, table=True):
    """A stored workout plan.

    ``position`` keeps the list order stable across reads; new plans get a
    position below every existing one so they list first.
    """

    __tablename__ = "workout_plans"

    id: str = Field(primary_key=True, max_length=64)
    position: int = Field(default=0, nullable=False, index=True)
    title: str = Field(nullable=False, max_length=200)
    author: str = Field(default="You", max_length=200)

    tags: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )
    segments: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )

    # Timestamps (UTC)
    created_at: datetime.datetime = Field(default_factory=utc_now,
                                         sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=utc_now,
                                         sa_column=Column(DateTime(timezone=True), nullable=False))
