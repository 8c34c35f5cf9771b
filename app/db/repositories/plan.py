"""
Workout plan repository.

Implements the :class:`app.workout.stores.PlanStore` protocol on top of
the ``workout_plans`` table.
"""

from typing import Iterable, Optional

from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, select

from app.models.plan import PlanRecord, utc_now
from app.schemas.plan import Plan


class PlanRepository:
    """Repository for workout plans."""

    def __init__(self, session: Session):
        self.session = session

    def initialize(self, seed: Iterable[Plan] = ()) -> None:
        """Insert *seed* plans when the table is empty."""
        if self.session.exec(select(func.count()).select_from(PlanRecord)).first():
            return
        seeded = 0
        for position, plan in enumerate(seed):
            self.session.add(_to_record(plan, position))
            seeded += 1
        self.session.commit()
        logger.info(f"Seeded {seeded} default plan(s)")

    def load(self) -> list[Plan]:
        statement = select(PlanRecord).order_by(PlanRecord.position, PlanRecord.created_at)
        return [_to_plan(record) for record in self.session.exec(statement).all()]

    def get(self, plan_id: str) -> Optional[Plan]:
        record = self.session.get(PlanRecord, plan_id)
        return _to_plan(record) if record else None

    def save(self, plan: Plan) -> Plan:
        """Replace an existing plan in place or insert a new one first in the list."""
        record = self.session.get(PlanRecord, plan.id)
        if record is None:
            lowest = self.session.exec(select(func.min(PlanRecord.position))).first()
            record = _to_record(plan, (lowest if lowest is not None else 1) - 1)
        else:
            record.title = plan.title
            record.author = plan.author
            record.tags = list(plan.tags)
            record.segments = [segment.model_dump(mode="json") for segment in plan.segments]
            record.updated_at = utc_now()
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return _to_plan(record)

    def delete(self, plan_id: str) -> bool:
        record = self.session.get(PlanRecord, plan_id)
        if record:
            self.session.delete(record)
            self.session.commit()
            return True
        return False


def _to_record(plan: Plan, position: int) -> PlanRecord:
    return PlanRecord(id=plan.id, position=position, title=plan.title, author=plan.author, tags=list(plan.tags),
                      segments=[segment.model_dump(mode="json") for segment in plan.segments], )


def _to_plan(record: PlanRecord) -> Plan:
    return Plan(id=record.id, title=record.title, author=record.author, tags=record.tags, segments=record.segments, )
