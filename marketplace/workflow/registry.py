"""Registry mapping entity keys to their status machines and record types."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from marketplace.core.exceptions import ConflictError, NotFoundError
from marketplace.models import (
    GoalStatus,
    LessonPlanStatus,
    LessonQuoteStatus,
    LessonStatus,
    MilestoneStatus,
    ObjectiveStatus,
    StatusRecord,
    TeacherLessonHourlyRateStatus,
)
from marketplace.workflow.state_machine import StateMachine

# Bump when the exported structure changes so clients can detect skew.
SCHEMA_VERSION = 1


@dataclass(frozen=True)
class StatusLifecycle:
    entity: str
    machine: StateMachine
    record_type: type[StatusRecord]


class StateMachineRegistry:
    """Lookup of status lifecycles by entity key."""

    def __init__(self) -> None:
        self._lifecycles: dict[str, StatusLifecycle] = {}

    def register(self, record_type: type[StatusRecord]) -> StatusLifecycle:
        machine = record_type.machine
        if machine.entity in self._lifecycles:
            raise ConflictError(f"Status lifecycle already registered: {machine.entity}")
        lifecycle = StatusLifecycle(entity=machine.entity, machine=machine, record_type=record_type)
        self._lifecycles[machine.entity] = lifecycle
        return lifecycle

    def get(self, entity: str) -> StatusLifecycle:
        if entity not in self._lifecycles:
            raise NotFoundError(f"Unknown status lifecycle: {entity}")
        return self._lifecycles[entity]

    def machine(self, entity: str) -> StateMachine:
        return self.get(entity).machine

    def record_type(self, entity: str) -> type[StatusRecord]:
        return self.get(entity).record_type

    def keys(self) -> list[str]:
        return sorted(self._lifecycles.keys())

    def describe_all(self, entities: Iterable[str] | None = None) -> dict[str, Any]:
        selected = list(entities) if entities else self.keys()
        return {
            "schema_version": SCHEMA_VERSION,
            "machines": {entity: self.machine(entity).describe() for entity in selected},
        }


def build_default_registry() -> StateMachineRegistry:
    registry = StateMachineRegistry()
    registry.register(GoalStatus)
    registry.register(ObjectiveStatus)
    registry.register(LessonStatus)
    registry.register(LessonQuoteStatus)
    registry.register(TeacherLessonHourlyRateStatus)
    registry.register(MilestoneStatus)
    registry.register(LessonPlanStatus)
    return registry


default_registry = build_default_registry()
