from __future__ import annotations

import pytest

from marketplace.workflow.registry import default_registry

ENTITIES = default_registry.keys()


@pytest.mark.parametrize("entity", ENTITIES)
def test_every_status_has_a_table_row(entity):
    machine = default_registry.machine(entity)
    assert set(machine.transitions) == set(machine.status_enum)


@pytest.mark.parametrize("entity", ENTITIES)
def test_validity_agrees_with_resulting_status(entity):
    machine = default_registry.machine(entity)
    for status in machine.status_enum:
        for transition in machine.transition_enum:
            expected = machine.transitions[status].get(transition)
            assert machine.get_resulting_status(status, transition) is expected
            assert machine.is_valid_transition(status, transition) is (expected is not None)


@pytest.mark.parametrize("entity", ENTITIES)
def test_terminal_statuses_accept_nothing(entity):
    machine = default_registry.machine(entity)
    for status in machine.terminal_statuses():
        assert machine.valid_transitions(status) == []


@pytest.mark.parametrize("entity", ENTITIES)
def test_every_member_has_a_label(entity):
    machine = default_registry.machine(entity)
    for status in machine.status_enum:
        assert machine.display_label_for_status(status)
    for transition in machine.transition_enum:
        assert machine.display_label_for_transition(transition)


@pytest.mark.parametrize("entity", ENTITIES)
def test_every_status_is_reachable(entity):
    assert default_registry.machine(entity).unreachable_statuses() == []


@pytest.mark.parametrize("entity", ENTITIES)
def test_record_type_builds_initial_record(entity):
    lifecycle = default_registry.get(entity)
    record = lifecycle.record_type.create("status-1", "owner-1", lifecycle.machine.initial_status)
    assert record.owner_id == "owner-1"
    assert record.status_label() == lifecycle.machine.display_label_for_status(lifecycle.machine.initial_status)
