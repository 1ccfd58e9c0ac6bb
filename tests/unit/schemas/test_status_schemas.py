from __future__ import annotations

from datetime import datetime, timezone

import pydantic
import pytest

from marketplace.core.exceptions import InvalidTransitionError, NotFoundError
from marketplace.models import GoalStatus, GoalStatusTransition, GoalStatusValue, goal_status_machine
from marketplace.schemas import ErrorEnvelope, StatusChangeRequest, StatusRecordResponse, StatusTransitionRequest


def test_transition_request_parses_into_machine_transition():
    request = StatusTransitionRequest.model_validate({"transition": "COMPLETE", "context": {"notes": "did great"}})
    assert goal_status_machine.parse_transition(request.transition) is GoalStatusTransition.COMPLETE
    assert request.context == {"notes": "did great"}


def test_transition_request_requires_a_value():
    with pytest.raises(pydantic.ValidationError):
        StatusTransitionRequest.model_validate({"transition": ""})
    with pytest.raises(pydantic.ValidationError):
        StatusChangeRequest.model_validate({})


def test_change_request_carries_target_status():
    request = StatusChangeRequest(status="ACHIEVED")
    assert goal_status_machine.parse_status(request.status) is GoalStatusValue.ACHIEVED
    assert request.context is None


def test_record_response_includes_label_and_owner():
    created = datetime(2025, 4, 22, 3, 17, 45, tzinfo=timezone.utc)
    record = GoalStatus(
        id="status-1",
        goal_id="goal-1",
        status=GoalStatusValue.CREATED,
        context='{"source": "import"}',
        created_at=created,
    )
    response = StatusRecordResponse.from_record(record)
    assert response.entity == "goal"
    assert response.owner_id == "goal-1"
    assert response.status == "CREATED"
    assert response.status_label == "Ready to Start"
    assert response.context == {"source": "import"}
    assert response.created_at == created


def test_error_envelope_maps_marketplace_exceptions():
    envelope = ErrorEnvelope.from_exception(InvalidTransitionError("Invalid status transition 'START' from status 'ACHIEVED'"))
    assert envelope.status_code == 400
    assert envelope.error_code == "invalid_transition"
    assert envelope.detail == "Invalid status transition 'START' from status 'ACHIEVED'"

    assert ErrorEnvelope.from_exception(NotFoundError("goal not found: g1")).status_code == 404


def test_error_envelope_hides_unexpected_errors():
    envelope = ErrorEnvelope.from_exception(RuntimeError("db password leaked"))
    assert envelope.model_dump() == {
        "status": "error",
        "status_code": 500,
        "error_code": "internal_error",
        "detail": "Internal server error.",
    }
