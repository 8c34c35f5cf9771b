"""Built-in plans offered on first start, and the draft used for new plans."""

from __future__ import annotations

from app.schemas.plan import Intensity, MetricDefinition, MetricKind, Plan, Segment, new_id

INSTRUCTOR_TEAM = "Instructor Team"


def _default_segments() -> tuple[Segment, ...]:
    return (Segment(name="Warmup", duration_minutes=10, intensity=Intensity.LOW, notes="Mobility + breath",
                    metric=MetricDefinition(kind=MetricKind.TIMED, label="Mobility"), ),
            Segment(name="Main Set", duration_minutes=30, intensity=Intensity.MODERATE, notes="Circuit training",
                    metric=MetricDefinition(kind=MetricKind.COUNTED, label="Total Reps"), target_value=150, ),
            Segment(name="Cooldown", duration_minutes=5, intensity=Intensity.LOW, notes="Stretch + reflect",
                    metric=MetricDefinition(kind=MetricKind.TIMED, label="Stretch"), ), )


def default_plans() -> list[Plan]:
    """Seed plans, each totalling 45 minutes."""
    return [Plan(title="Baseline 45", tags=("general", "intro"), segments=_default_segments(), author=INSTRUCTOR_TEAM),
            Plan(title="Strength & Stillness", tags=("strength", "breath"), author=INSTRUCTOR_TEAM, segments=(
                Segment(name="Warmup", duration_minutes=8, intensity=Intensity.LOW, notes="Joint circles + easy jog",
                        metric=MetricDefinition(kind=MetricKind.TIMED, label="Warm"), ),
                Segment(name="Strength Circuit", duration_minutes=27, intensity=Intensity.HIGH,
                        notes="Push/Pull/Squat rotations",
                        metric=MetricDefinition(kind=MetricKind.COUNTED, label="Total Reps"), ),
                Segment(name="Breath & Prayer Walk", duration_minutes=10, intensity=Intensity.LOW,
                        notes="Box breathing + walk", metric=MetricDefinition(kind=MetricKind.TIMED, label="Walk"), ),
            ), ), ]


def new_plan_draft() -> Plan:
    """A fresh plan built from the default segments with new ids."""
    return Plan(id=new_id(), title="New Plan", tags=(), segments=_default_segments(), author="You")