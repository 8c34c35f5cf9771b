"""
Plan service: the authoring boundary.

Plans are only accepted here when their segments add up to the fixed
session length.  The timer engine never repeats this check; it works with
whatever durations a plan carries.
"""

from typing import Optional

from fastapi import HTTPException, status
from loguru import logger

from app.schemas.plan import Plan, PlanWrite, new_id
from app.workout.defaults import new_plan_draft
from app.workout.stores import PlanStore


class PlanService:
    """Service for plan authoring."""

    def __init__(self, store: PlanStore, session_length_minutes: int = 45):
        self.store = store
        self.session_length_minutes = session_length_minutes

    def list_plans(self) -> list[Plan]:
        return self.store.load()

    def get(self, plan_id: str) -> Plan:
        plan = self.store.get(plan_id)
        if plan is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
        return plan

    def draft(self) -> Plan:
        """Unsaved starting point for a new plan."""
        return new_plan_draft()

    def create(self, data: PlanWrite, plan_id: Optional[str] = None) -> Plan:
        plan = self._build(data, plan_id or new_id())
        if self.store.get(plan.id) is not None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Plan '{plan.id}' already exists")
        return self._save(plan)

    def update(self, plan_id: str, data: PlanWrite) -> Plan:
        self.get(plan_id)
        return self._save(self._build(data, plan_id))

    def delete(self, plan_id: str) -> None:
        if not self.store.delete(plan_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
        logger.info(f"Deleted plan {plan_id}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def validate(self, plan: Plan) -> None:
        """Reject a plan whose total differs from the session length."""
        total = plan.total_minutes
        if total != self.session_length_minutes:
            logger.warning(f"Rejected plan '{plan.title}': {total} min instead of {self.session_length_minutes}")
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=(f"Plan must total {self.session_length_minutes} minutes. "
                                        f"Currently {total}."), )

    def _save(self, plan: Plan) -> Plan:
        self.validate(plan)
        saved = self.store.save(plan)
        logger.info(f"Saved plan {saved.id} '{saved.title}' ({len(saved.segments)} segments)")
        return saved

    @staticmethod
    def _build(data: PlanWrite, plan_id: str) -> Plan:
        try:
            return Plan(id=plan_id, title=data.title, tags=data.tags, segments=data.segments, author=data.author)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f"Invalid plan: {e}", )
