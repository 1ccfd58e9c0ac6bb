"""Objective status lifecycle.

Objectives are student-facing goals and share the goal graph exactly, so the
two can be rendered by the same UI components.
"""

from __future__ import annotations

from typing import ClassVar

from marketplace.models.base import StatusRecord
from marketplace.models.enums import ObjectiveStatusTransition, ObjectiveStatusValue
from marketplace.workflow.state_machine import StateMachine

OBJECTIVE_STATUS_TRANSITIONS = {
    ObjectiveStatusValue.CREATED: {
        ObjectiveStatusTransition.START: ObjectiveStatusValue.IN_PROGRESS,
        ObjectiveStatusTransition.ABANDON: ObjectiveStatusValue.ABANDONED,
    },
    ObjectiveStatusValue.IN_PROGRESS: {
        ObjectiveStatusTransition.COMPLETE: ObjectiveStatusValue.ACHIEVED,
        ObjectiveStatusTransition.ABANDON: ObjectiveStatusValue.ABANDONED,
    },
    ObjectiveStatusValue.ACHIEVED: {
        ObjectiveStatusTransition.ABANDON: ObjectiveStatusValue.ABANDONED,
    },
    ObjectiveStatusValue.ABANDONED: {},
}

objective_status_machine: StateMachine[ObjectiveStatusValue, ObjectiveStatusTransition] = StateMachine(
    entity="objective",
    status_enum=ObjectiveStatusValue,
    transition_enum=ObjectiveStatusTransition,
    transitions=OBJECTIVE_STATUS_TRANSITIONS,
    initial_status=ObjectiveStatusValue.CREATED,
)


class ObjectiveStatus(StatusRecord):
    owner_field: ClassVar[str] = "objective_id"
    machine: ClassVar[StateMachine] = objective_status_machine

    objective_id: str
    status: ObjectiveStatusValue
