"""Goal status lifecycle: transition table, machine and status record."""

from __future__ import annotations

from typing import ClassVar

from marketplace.models.base import StatusRecord
from marketplace.models.enums import GoalStatusTransition, GoalStatusValue
from marketplace.workflow.state_machine import StateMachine

GOAL_STATUS_TRANSITIONS = {
    GoalStatusValue.CREATED: {
        GoalStatusTransition.START: GoalStatusValue.IN_PROGRESS,
        GoalStatusTransition.ABANDON: GoalStatusValue.ABANDONED,
    },
    GoalStatusValue.IN_PROGRESS: {
        GoalStatusTransition.COMPLETE: GoalStatusValue.ACHIEVED,
        GoalStatusTransition.ABANDON: GoalStatusValue.ABANDONED,
    },
    GoalStatusValue.ACHIEVED: {
        # Pending product decision: retracting an achieved goal may become a separate VOID transition.
        GoalStatusTransition.ABANDON: GoalStatusValue.ABANDONED,
    },
    GoalStatusValue.ABANDONED: {},
}

goal_status_machine: StateMachine[GoalStatusValue, GoalStatusTransition] = StateMachine(
    entity="goal",
    status_enum=GoalStatusValue,
    transition_enum=GoalStatusTransition,
    transitions=GOAL_STATUS_TRANSITIONS,
    initial_status=GoalStatusValue.CREATED,
    status_labels={GoalStatusValue.CREATED: "Ready to Start"},
)


class GoalStatus(StatusRecord):
    owner_field: ClassVar[str] = "goal_id"
    machine: ClassVar[StateMachine] = goal_status_machine

    goal_id: str
    status: GoalStatusValue
