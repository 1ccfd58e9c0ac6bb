"""Lesson status lifecycle: from a student's request through delivery."""

from __future__ import annotations

from typing import ClassVar

from marketplace.models.base import StatusRecord
from marketplace.models.enums import LessonStatusTransition, LessonStatusValue
from marketplace.workflow.state_machine import StateMachine

LESSON_STATUS_TRANSITIONS = {
    LessonStatusValue.REQUESTED: {
        LessonStatusTransition.ACCEPT: LessonStatusValue.ACCEPTED,
        LessonStatusTransition.REJECT: LessonStatusValue.REJECTED,
    },
    LessonStatusValue.ACCEPTED: {
        LessonStatusTransition.DEFINE: LessonStatusValue.DEFINED,
        LessonStatusTransition.START: LessonStatusValue.STARTED,
        LessonStatusTransition.VOID: LessonStatusValue.VOIDED,
    },
    LessonStatusValue.DEFINED: {
        LessonStatusTransition.START: LessonStatusValue.STARTED,
        LessonStatusTransition.COMPLETE: LessonStatusValue.COMPLETED,
        LessonStatusTransition.VOID: LessonStatusValue.VOIDED,
    },
    LessonStatusValue.STARTED: {
        LessonStatusTransition.COMPLETE: LessonStatusValue.COMPLETED,
        LessonStatusTransition.MARK_INCOMPLETE: LessonStatusValue.INCOMPLETE,
        LessonStatusTransition.VOID: LessonStatusValue.VOIDED,
    },
    LessonStatusValue.REJECTED: {
        LessonStatusTransition.VOID: LessonStatusValue.VOIDED,
    },
    LessonStatusValue.COMPLETED: {
        LessonStatusTransition.VOID: LessonStatusValue.VOIDED,
    },
    LessonStatusValue.INCOMPLETE: {
        LessonStatusTransition.VOID: LessonStatusValue.VOIDED,
    },
    LessonStatusValue.VOIDED: {},
}

lesson_status_machine: StateMachine[LessonStatusValue, LessonStatusTransition] = StateMachine(
    entity="lesson",
    status_enum=LessonStatusValue,
    transition_enum=LessonStatusTransition,
    transitions=LESSON_STATUS_TRANSITIONS,
    initial_status=LessonStatusValue.REQUESTED,
)


class LessonStatus(StatusRecord):
    owner_field: ClassVar[str] = "lesson_id"
    machine: ClassVar[StateMachine] = lesson_status_machine

    lesson_id: str
    status: LessonStatusValue
