from __future__ import annotations

import json

import pytest

from marketplace.core.exceptions import ConflictError, NotFoundError
from marketplace.models import GoalStatus, goal_status_machine
from marketplace.workflow import export as export_module
from marketplace.workflow.registry import SCHEMA_VERSION, StateMachineRegistry, build_default_registry, default_registry


def test_default_registry_lists_every_lifecycle():
    assert default_registry.keys() == [
        "goal",
        "lesson",
        "lesson_plan",
        "lesson_quote",
        "milestone",
        "objective",
        "teacher_lesson_hourly_rate",
    ]
    assert default_registry.machine("goal") is goal_status_machine
    assert default_registry.record_type("goal") is GoalStatus


def test_registry_rejects_duplicates_and_unknown_entities():
    registry = StateMachineRegistry()
    registry.register(GoalStatus)
    with pytest.raises(ConflictError):
        registry.register(GoalStatus)
    with pytest.raises(NotFoundError, match="Unknown status lifecycle: invoice"):
        registry.get("invoice")


def test_describe_all_filters_entities():
    description = build_default_registry().describe_all(["goal"])
    assert description["schema_version"] == SCHEMA_VERSION
    assert list(description["machines"]) == ["goal"]
    assert description["machines"]["goal"]["table"]["CREATED"] == {"START": "IN_PROGRESS", "ABANDON": "ABANDONED"}


def test_export_writes_to_stdout(capsys, monkeypatch):
    monkeypatch.delenv("STATUS_EXPORT_PATH", raising=False)
    assert export_module.main(["--entity", "lesson_quote"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert list(payload["machines"]) == ["lesson_quote"]
    assert payload["machines"]["lesson_quote"]["initial_status"] == "CREATED"


def test_export_writes_file(tmp_path):
    target = tmp_path / "generated" / "status-machines.json"
    assert export_module.main(["--output", str(target)]) == 0

    payload = json.loads(target.read_text(encoding="utf-8"))
    assert sorted(payload["machines"]) == default_registry.keys()


def test_export_uses_configured_path(tmp_path, monkeypatch):
    target = tmp_path / "configured.json"
    monkeypatch.setenv("STATUS_EXPORT_PATH", str(target))
    assert export_module.main(["--entity", "goal", "--entity", "objective"]) == 0
    assert sorted(json.loads(target.read_text(encoding="utf-8"))["machines"]) == ["goal", "objective"]


def test_export_rejects_unknown_entity(capsys):
    with pytest.raises(SystemExit) as exc_info:
        export_module.main(["--entity", "invoice"])
    assert exc_info.value.code == 2
    assert "Unknown status lifecycle: invoice" in capsys.readouterr().err
