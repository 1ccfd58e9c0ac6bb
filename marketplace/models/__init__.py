"""Status enums, transition tables and status-record types per lifecycle entity."""

from marketplace.models.base import StatusRecord
from marketplace.models.enums import (
    GoalStatusTransition,
    GoalStatusValue,
    LessonPlanStatusTransition,
    LessonPlanStatusValue,
    LessonQuoteStatusTransition,
    LessonQuoteStatusValue,
    LessonStatusTransition,
    LessonStatusValue,
    MilestoneStatusTransition,
    MilestoneStatusValue,
    ObjectiveStatusTransition,
    ObjectiveStatusValue,
    TeacherLessonHourlyRateStatusTransition,
    TeacherLessonHourlyRateStatusValue,
)
from marketplace.models.goal_status import GoalStatus, goal_status_machine
from marketplace.models.lesson_plan_status import LessonPlanStatus, lesson_plan_status_machine
from marketplace.models.lesson_quote_status import LessonQuoteStatus, lesson_quote_status_machine
from marketplace.models.lesson_status import LessonStatus, lesson_status_machine
from marketplace.models.milestone_status import MilestoneStatus, milestone_status_machine
from marketplace.models.objective_status import ObjectiveStatus, objective_status_machine
from marketplace.models.teacher_lesson_hourly_rate_status import (
    TeacherLessonHourlyRateStatus,
    teacher_lesson_hourly_rate_status_machine,
)

__all__ = [
    "GoalStatus",
    "GoalStatusTransition",
    "GoalStatusValue",
    "LessonPlanStatus",
    "LessonPlanStatusTransition",
    "LessonPlanStatusValue",
    "LessonQuoteStatus",
    "LessonQuoteStatusTransition",
    "LessonQuoteStatusValue",
    "LessonStatus",
    "LessonStatusTransition",
    "LessonStatusValue",
    "MilestoneStatus",
    "MilestoneStatusTransition",
    "MilestoneStatusValue",
    "ObjectiveStatus",
    "ObjectiveStatusTransition",
    "ObjectiveStatusValue",
    "StatusRecord",
    "TeacherLessonHourlyRateStatus",
    "TeacherLessonHourlyRateStatusTransition",
    "TeacherLessonHourlyRateStatusValue",
    "goal_status_machine",
    "lesson_plan_status_machine",
    "lesson_quote_status_machine",
    "lesson_status_machine",
    "milestone_status_machine",
    "objective_status_machine",
    "teacher_lesson_hourly_rate_status_machine",
]
