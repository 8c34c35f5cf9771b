"""
Store interfaces for plans, session logs and the display name.

The timer and analytics code only ever talk to these protocols.  Two
families implement them:

- the in-memory stores below, used by tests and simulations;
- the SQLModel repositories in :mod:`app.db.repositories`, used by the
  service.

Each store has an explicit ``initialize`` step; nothing is created as a
side effect of importing a module.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable

from loguru import logger

from app.schemas.plan import Plan
from app.schemas.session_log import SessionLog

DEFAULT_LOG_CAPACITY = 500


@runtime_checkable
class LogStore(Protocol):
    """Append-only, capacity-bounded collection of session logs."""

    capacity: int

    def initialize(self) -> None: ...

    def append(self, log: SessionLog) -> SessionLog: ...

    def load(self) -> list[SessionLog]:
        """All retained logs, most recent first."""
        ...

    def chronological(self) -> list[SessionLog]:
        """All retained logs, oldest first."""
        ...


@runtime_checkable
class PlanStore(Protocol):
    """Ordered collection of plans keyed by ``Plan.id``."""

    def initialize(self, seed: Iterable[Plan] = ()) -> None: ...

    def load(self) -> list[Plan]: ...

    def get(self, plan_id: str) -> Optional[Plan]: ...

    def save(self, plan: Plan) -> Plan: ...

    def delete(self, plan_id: str) -> bool: ...


@runtime_checkable
class ProfileStore(Protocol):
    """The single display-name entry."""

    def get_display_name(self) -> str: ...

    def set_display_name(self, name: str) -> str: ...


# ======================================================================
# In-memory implementations
# ======================================================================


class InMemoryLogStore:
    """List-backed :class:`LogStore`, newest first."""

    def __init__(self, capacity: int = DEFAULT_LOG_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._logs: list[SessionLog] = []  # most recent first

    def initialize(self) -> None:
        self._logs = []

    def append(self, log: SessionLog) -> SessionLog:
        self._logs.insert(0, log)
        if len(self._logs) > self.capacity:
            dropped = len(self._logs) - self.capacity
            del self._logs[self.capacity:]
            logger.debug(f"Log store full, evicted {dropped} oldest log(s)")
        return log

    def load(self) -> list[SessionLog]:
        return list(self._logs)

    def chronological(self) -> list[SessionLog]:
        return list(reversed(self._logs))

    def __len__(self) -> int:
        return len(self._logs)


class InMemoryPlanStore:
    """List-backed :class:`PlanStore` keeping insertion order."""

    def __init__(self) -> None:
        self._plans: list[Plan] = []

    def initialize(self, seed: Iterable[Plan] = ()) -> None:
        if not self._plans:
            self._plans = list(seed)

    def load(self) -> list[Plan]:
        return list(self._plans)

    def get(self, plan_id: str) -> Optional[Plan]:
        return next((p for p in self._plans if p.id == plan_id), None)

    def save(self, plan: Plan) -> Plan:
        """Replace in place if the id exists, otherwise insert at the front."""
        for index, existing in enumerate(self._plans):
            if existing.id == plan.id:
                self._plans[index] = plan
                return plan
        self._plans.insert(0, plan)
        return plan

    def delete(self, plan_id: str) -> bool:
        before = len(self._plans)
        self._plans = [p for p in self._plans if p.id != plan_id]
        return len(self._plans) != before


class InMemoryProfileStore:
    """:class:`ProfileStore` holding the name in an attribute."""

    def __init__(self, display_name: str = ""):
        self._display_name = display_name

    def get_display_name(self) -> str:
        return self._display_name

    def set_display_name(self, name: str) -> str:
        self._display_name = name.strip()
        return self._display_name
