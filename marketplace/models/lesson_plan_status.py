"""Lesson plan status lifecycle: drafting, approval and delivery of a plan."""

from __future__ import annotations

from typing import ClassVar

from marketplace.models.base import StatusRecord
from marketplace.models.enums import LessonPlanStatusTransition, LessonPlanStatusValue
from marketplace.workflow.state_machine import StateMachine

LESSON_PLAN_STATUS_TRANSITIONS = {
    LessonPlanStatusValue.DRAFT: {
        LessonPlanStatusTransition.SUBMIT_FOR_APPROVAL: LessonPlanStatusValue.PENDING_APPROVAL,
        LessonPlanStatusTransition.CANCEL_PLAN: LessonPlanStatusValue.CANCELLED,
    },
    LessonPlanStatusValue.PENDING_APPROVAL: {
        LessonPlanStatusTransition.APPROVE: LessonPlanStatusValue.ACTIVE,
        LessonPlanStatusTransition.REJECT: LessonPlanStatusValue.REJECTED,
        LessonPlanStatusTransition.REVISE: LessonPlanStatusValue.DRAFT,
        LessonPlanStatusTransition.CANCEL_PLAN: LessonPlanStatusValue.CANCELLED,
    },
    LessonPlanStatusValue.ACTIVE: {
        LessonPlanStatusTransition.COMPLETE_PLAN: LessonPlanStatusValue.COMPLETED,
        LessonPlanStatusTransition.CANCEL_PLAN: LessonPlanStatusValue.CANCELLED,
    },
    LessonPlanStatusValue.REJECTED: {
        LessonPlanStatusTransition.REVISE: LessonPlanStatusValue.DRAFT,
        LessonPlanStatusTransition.CANCEL_PLAN: LessonPlanStatusValue.CANCELLED,
    },
    LessonPlanStatusValue.COMPLETED: {},
    LessonPlanStatusValue.CANCELLED: {},
}

lesson_plan_status_machine: StateMachine[LessonPlanStatusValue, LessonPlanStatusTransition] = StateMachine(
    entity="lesson_plan",
    status_enum=LessonPlanStatusValue,
    transition_enum=LessonPlanStatusTransition,
    transitions=LESSON_PLAN_STATUS_TRANSITIONS,
    initial_status=LessonPlanStatusValue.DRAFT,
    transition_labels={
        LessonPlanStatusTransition.COMPLETE_PLAN: "Complete",
        LessonPlanStatusTransition.CANCEL_PLAN: "Cancel",
    },
)


class LessonPlanStatus(StatusRecord):
    owner_field: ClassVar[str] = "lesson_plan_id"
    machine: ClassVar[StateMachine] = lesson_plan_status_machine

    lesson_plan_id: str
    status: LessonPlanStatusValue
