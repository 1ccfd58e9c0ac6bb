"""Teacher hourly rate status lifecycle."""

from __future__ import annotations

from typing import ClassVar

from marketplace.models.base import StatusRecord
from marketplace.models.enums import TeacherLessonHourlyRateStatusTransition, TeacherLessonHourlyRateStatusValue
from marketplace.workflow.state_machine import StateMachine

TEACHER_LESSON_HOURLY_RATE_STATUS_TRANSITIONS = {
    TeacherLessonHourlyRateStatusValue.ACTIVE: {
        TeacherLessonHourlyRateStatusTransition.DEACTIVATE: TeacherLessonHourlyRateStatusValue.INACTIVE,
    },
    TeacherLessonHourlyRateStatusValue.INACTIVE: {
        TeacherLessonHourlyRateStatusTransition.ACTIVATE: TeacherLessonHourlyRateStatusValue.ACTIVE,
    },
}

teacher_lesson_hourly_rate_status_machine: StateMachine[
    TeacherLessonHourlyRateStatusValue, TeacherLessonHourlyRateStatusTransition
] = StateMachine(
    entity="teacher_lesson_hourly_rate",
    status_enum=TeacherLessonHourlyRateStatusValue,
    transition_enum=TeacherLessonHourlyRateStatusTransition,
    transitions=TEACHER_LESSON_HOURLY_RATE_STATUS_TRANSITIONS,
    initial_status=TeacherLessonHourlyRateStatusValue.ACTIVE,
)


class TeacherLessonHourlyRateStatus(StatusRecord):
    owner_field: ClassVar[str] = "rate_id"
    machine: ClassVar[StateMachine] = teacher_lesson_hourly_rate_status_machine

    rate_id: str
    status: TeacherLessonHourlyRateStatusValue
