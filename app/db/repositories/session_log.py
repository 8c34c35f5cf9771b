"""
Session log repository.

Implements the :class:`app.workout.stores.LogStore` protocol on top of the
``session_logs`` table: append-only, ordered by creation, and capped at
``capacity`` rows (oldest rows are deleted on append).
"""

import datetime
from typing import Optional

from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, select

from app.models.session_log import SessionLogRecord
from app.schemas.session_log import MetricEntry, SessionLog
from app.workout.stores import DEFAULT_LOG_CAPACITY


class SessionLogRepository:
    """Repository for saved sessions."""

    def __init__(self, session: Session, capacity: int = DEFAULT_LOG_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.session = session
        self.capacity = capacity

    def initialize(self) -> None:
        """Apply the capacity to whatever is already stored."""
        self._evict()
        self.session.commit()

    def append(self, log: SessionLog) -> SessionLog:
        self.session.add(_to_record(log))
        self.session.flush()
        self._evict()
        self.session.commit()
        return log

    def load(self, plan_id: Optional[str] = None) -> list[SessionLog]:
        """Retained logs, most recent first."""
        statement = select(SessionLogRecord).order_by(SessionLogRecord.seq.desc())
        if plan_id is not None:
            statement = statement.where(SessionLogRecord.plan_id == plan_id)
        return [_to_log(record) for record in self.session.exec(statement).all()]

    def chronological(self, plan_id: Optional[str] = None) -> list[SessionLog]:
        """Retained logs, oldest first."""
        return list(reversed(self.load(plan_id)))

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(SessionLogRecord)).first() or 0

    def _evict(self) -> None:
        overflow = self.count() - self.capacity
        if overflow <= 0:
            return
        oldest = select(SessionLogRecord).order_by(SessionLogRecord.seq).limit(overflow)
        doomed = list(self.session.exec(oldest).all())
        for record in doomed:
            self.session.delete(record)
        self.session.flush()
        logger.info(f"Log store over capacity ({self.capacity}), evicted {len(doomed)} oldest log(s)")


def _to_record(log: SessionLog) -> SessionLogRecord:
    timestamp = log.timestamp
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=datetime.timezone.utc)
    else:
        timestamp = timestamp.astimezone(datetime.timezone.utc)
    return SessionLogRecord(id=log.id, user_id=log.user_id, plan_id=log.plan_id, timestamp=timestamp,
                            duration_minutes=log.duration_minutes, effort_rating=log.effort_rating, notes=log.notes,
                            metric_entries=[entry.model_dump(mode="json") for entry in log.metric_entries], )


def _to_log(record: SessionLogRecord) -> SessionLog:
    timestamp = record.timestamp
    # SQLite hands the stored UTC value back without tzinfo
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=datetime.timezone.utc)
    return SessionLog(id=record.id, user_id=record.user_id, plan_id=record.plan_id, timestamp=timestamp,
                      duration_minutes=record.duration_minutes, effort_rating=record.effort_rating,
                      notes=record.notes,
                      metric_entries=tuple(MetricEntry(**entry) for entry in record.metric_entries), )
