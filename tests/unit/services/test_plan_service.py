"""Tests for the plan authoring boundary."""

import pytest
from fastapi import HTTPException

from app.schemas.plan import PlanWrite, Segment
from app.services.plan_service import PlanService
from app.workout.defaults import default_plans
from app.workout.stores import InMemoryPlanStore


def _service() -> PlanService:
    store = InMemoryPlanStore()
    store.initialize(default_plans())
    return PlanService(store, session_length_minutes=45)


def _write(*minutes: int, title: str = "Mine") -> PlanWrite:
    return PlanWrite(title=title, tags=["a", "a", "b"],
                     segments=[Segment(id=f"s{i}", duration_minutes=m) for i, m in enumerate(minutes)])


class TestCreate:
    def test_valid_plan_saved_first(self):
        service = _service()
        plan = service.create(_write(15, 30))
        assert service.list_plans()[0].id == plan.id
        assert plan.tags == ("a", "b")
        assert plan.total_minutes == 45

    @pytest.mark.parametrize("minutes, total", [((10, 30), 40), ((30, 30), 60), ((), 0)])
    def test_wrong_total_rejected(self, minutes, total):
        service = _service()
        with pytest.raises(HTTPException) as exc:
            service.create(_write(*minutes))
        assert exc.value.status_code == 422
        assert exc.value.detail == f"Plan must total 45 minutes. Currently {total}."
        assert len(service.list_plans()) == 2

    def test_custom_session_length(self):
        store = InMemoryPlanStore()
        service = PlanService(store, session_length_minutes=30)
        service.create(_write(10, 20))
        assert len(store.load()) == 1

    def test_duplicate_segment_ids_rejected(self):
        data = PlanWrite(title="Dup", segments=[Segment(id="x", duration_minutes=20),
                                                Segment(id="x", duration_minutes=25)])
        with pytest.raises(HTTPException) as exc:
            _service().create(data)
        assert exc.value.status_code == 422

    def test_existing_id_conflicts(self):
        service = _service()
        existing = service.list_plans()[0]
        with pytest.raises(HTTPException) as exc:
            service.create(_write(45), plan_id=existing.id)
        assert exc.value.status_code == 409


class TestUpdateDelete:
    def test_update_keeps_id_and_position(self):
        service = _service()
        target = service.list_plans()[1]
        updated = service.update(target.id, _write(5, 40, title="Edited"))
        assert updated.id == target.id
        assert [p.title for p in service.list_plans()] == ["Baseline 45", "Edited"]

    def test_update_invalid_total_keeps_original(self):
        service = _service()
        target = service.list_plans()[0]
        with pytest.raises(HTTPException):
            service.update(target.id, _write(50))
        assert service.get(target.id) == target

    def test_update_unknown(self):
        with pytest.raises(HTTPException) as exc:
            _service().update("missing", _write(45))
        assert exc.value.status_code == 404

    def test_delete(self):
        service = _service()
        target = service.list_plans()[0]
        service.delete(target.id)
        with pytest.raises(HTTPException) as exc:
            service.get(target.id)
        assert exc.value.status_code == 404
        with pytest.raises(HTTPException):
            service.delete(target.id)


def test_draft_is_valid_but_unsaved():
    service = _service()
    draft = service.draft()
    service.validate(draft)
    assert service.store.get(draft.id) is None
