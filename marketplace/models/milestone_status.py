"""Milestone status lifecycle for lesson plans."""

from __future__ import annotations

from typing import ClassVar

from marketplace.models.base import StatusRecord
from marketplace.models.enums import MilestoneStatusTransition, MilestoneStatusValue
from marketplace.workflow.state_machine import StateMachine

MILESTONE_STATUS_TRANSITIONS = {
    MilestoneStatusValue.CREATED: {
        MilestoneStatusTransition.START_PROGRESS: MilestoneStatusValue.IN_PROGRESS,
        MilestoneStatusTransition.CANCEL_MILESTONE: MilestoneStatusValue.CANCELLED,
    },
    MilestoneStatusValue.IN_PROGRESS: {
        MilestoneStatusTransition.MARK_COMPLETED: MilestoneStatusValue.COMPLETED,
        MilestoneStatusTransition.CANCEL_MILESTONE: MilestoneStatusValue.CANCELLED,
        MilestoneStatusTransition.RESET_TO_CREATED: MilestoneStatusValue.CREATED,
    },
    MilestoneStatusValue.COMPLETED: {
        # A completed milestone is cancelled with its plan.
        MilestoneStatusTransition.CANCEL_MILESTONE: MilestoneStatusValue.CANCELLED,
    },
    MilestoneStatusValue.CANCELLED: {},
}

milestone_status_machine: StateMachine[MilestoneStatusValue, MilestoneStatusTransition] = StateMachine(
    entity="milestone",
    status_enum=MilestoneStatusValue,
    transition_enum=MilestoneStatusTransition,
    transitions=MILESTONE_STATUS_TRANSITIONS,
    initial_status=MilestoneStatusValue.CREATED,
    transition_labels={MilestoneStatusTransition.CANCEL_MILESTONE: "Cancel"},
)


class MilestoneStatus(StatusRecord):
    owner_field: ClassVar[str] = "milestone_id"
    machine: ClassVar[StateMachine] = milestone_status_machine

    milestone_id: str
    status: MilestoneStatusValue
