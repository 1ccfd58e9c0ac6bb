"""Lesson quote status lifecycle. Every outcome of a quote is final."""

from __future__ import annotations

from typing import ClassVar

from marketplace.models.base import StatusRecord
from marketplace.models.enums import LessonQuoteStatusTransition, LessonQuoteStatusValue
from marketplace.workflow.state_machine import StateMachine

LESSON_QUOTE_STATUS_TRANSITIONS = {
    LessonQuoteStatusValue.CREATED: {
        LessonQuoteStatusTransition.ACCEPT: LessonQuoteStatusValue.ACCEPTED,
        LessonQuoteStatusTransition.REJECT: LessonQuoteStatusValue.REJECTED,
        LessonQuoteStatusTransition.EXPIRE: LessonQuoteStatusValue.EXPIRED,
    },
    LessonQuoteStatusValue.ACCEPTED: {},
    LessonQuoteStatusValue.REJECTED: {},
    LessonQuoteStatusValue.EXPIRED: {},
}

lesson_quote_status_machine: StateMachine[LessonQuoteStatusValue, LessonQuoteStatusTransition] = StateMachine(
    entity="lesson_quote",
    status_enum=LessonQuoteStatusValue,
    transition_enum=LessonQuoteStatusTransition,
    transitions=LESSON_QUOTE_STATUS_TRANSITIONS,
    initial_status=LessonQuoteStatusValue.CREATED,
    status_labels={LessonQuoteStatusValue.CREATED: "Awaiting Response"},
)


class LessonQuoteStatus(StatusRecord):
    owner_field: ClassVar[str] = "lesson_quote_id"
    machine: ClassVar[StateMachine] = lesson_quote_status_machine

    lesson_quote_id: str
    status: LessonQuoteStatusValue
