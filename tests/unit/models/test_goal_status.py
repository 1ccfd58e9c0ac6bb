from __future__ import annotations

from marketplace.models import GoalStatus, GoalStatusTransition, GoalStatusValue, goal_status_machine


def test_created_goal_can_start():
    assert goal_status_machine.is_valid_transition(GoalStatusValue.CREATED, GoalStatusTransition.START) is True
    assert goal_status_machine.get_resulting_status(GoalStatusValue.CREATED, GoalStatusTransition.START) is GoalStatusValue.IN_PROGRESS


def test_completing_with_notes_produces_achieved_record():
    result = goal_status_machine.get_resulting_status(GoalStatusValue.IN_PROGRESS, GoalStatusTransition.COMPLETE)
    assert result is GoalStatusValue.ACHIEVED

    record = GoalStatus.create("status-2", "goal-1", result, {"notes": "did great"})
    assert record.status is GoalStatusValue.ACHIEVED
    assert record.goal_id == "goal-1"
    assert record.owner_id == "goal-1"
    assert record.context == {"notes": "did great"}


def test_achieved_goal_cannot_restart():
    assert goal_status_machine.is_valid_transition(GoalStatusValue.ACHIEVED, GoalStatusTransition.START) is False
    assert goal_status_machine.get_resulting_status(GoalStatusValue.ACHIEVED, GoalStatusTransition.START) is None


def test_abandoned_goal_is_terminal():
    for transition in GoalStatusTransition:
        assert goal_status_machine.get_resulting_status(GoalStatusValue.ABANDONED, transition) is None
    assert goal_status_machine.terminal_statuses() == [GoalStatusValue.ABANDONED]


def test_achieved_goal_can_still_be_abandoned():
    assert goal_status_machine.get_resulting_status(GoalStatusValue.ACHIEVED, GoalStatusTransition.ABANDON) is GoalStatusValue.ABANDONED


def test_goal_labels():
    assert goal_status_machine.display_label_for_status(GoalStatusValue.CREATED) == "Ready to Start"
    assert goal_status_machine.display_label_for_status(GoalStatusValue.IN_PROGRESS) == "In Progress"
    assert goal_status_machine.display_label_for_transition(GoalStatusTransition.COMPLETE) == "Complete"
    assert goal_status_machine.display_label_for_status("FOO") == "FOO"


def test_goal_starts_in_created():
    assert goal_status_machine.initial_status is GoalStatusValue.CREATED
    assert goal_status_machine.unreachable_statuses() == []
