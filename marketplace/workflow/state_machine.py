"""Canonical table-driven status state machines for lifecycle entities.

Every entity with a status history (goals, objectives, lessons, quotes, hourly
rates, lesson plans, milestones) is described by one `StateMachine` instance:
a status enum, a transition enum and a table mapping each status to the
transitions it accepts and the status each one produces.
"""

from __future__ import annotations

import enum
import logging
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from marketplace.core.exceptions import (
    InvalidStatusValueError,
    InvalidTransitionError,
    InvalidTransitionValueError,
    StateMachineDefinitionError,
)

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=enum.Enum)
T = TypeVar("T", bound=enum.Enum)

UNKNOWN_STATUS_LABEL = "Unknown Status"
UNKNOWN_ACTION_LABEL = "Unknown Action"


def humanize(value: str) -> str:
    """Turn an enum value such as ``IN_PROGRESS`` into ``In Progress``."""
    return " ".join(word.capitalize() for word in value.split("_") if word)


def _raw(value: Any) -> str:
    return value.value if isinstance(value, enum.Enum) else str(value)


def invalid_transition_message(current_status: Any, transition: Any) -> str:
    return f"Invalid status transition '{_raw(transition)}' from status '{_raw(current_status)}'"


@dataclass(frozen=True)
class TransitionOutcome(Generic[S]):
    """Result of asking a machine to apply a transition.

    An invalid transition is an expected outcome, so it is reported through
    `is_valid`/`message` rather than raised. `unwrap()` converts it into an
    `InvalidTransitionError` for callers that want to fail fast.
    """

    current_status: S
    transition: enum.Enum
    resulting_status: S | None = None

    @property
    def is_valid(self) -> bool:
        return self.resulting_status is not None

    @property
    def message(self) -> str | None:
        if self.is_valid:
            return None
        return invalid_transition_message(self.current_status, self.transition)

    def unwrap(self) -> S:
        if self.resulting_status is None:
            raise InvalidTransitionError(
                self.message or "",
                current_status=_raw(self.current_status),
                transition=_raw(self.transition),
            )
        return self.resulting_status

    def unwrap_or(self, default: S) -> S:
        return self.resulting_status if self.resulting_status is not None else default


def _freeze_table(
    entity: str,
    status_enum: type[S],
    transition_enum: type[T],
    transitions: Mapping[S, Mapping[T, S]],
) -> Mapping[S, Mapping[T, S]]:
    missing = [status.value for status in status_enum if status not in transitions]
    if missing:
        raise StateMachineDefinitionError(
            f"{entity} transition table has no entry for status(es): {', '.join(missing)}"
        )

    frozen: dict[S, Mapping[T, S]] = {}
    for current, edges in transitions.items():
        if not isinstance(current, status_enum):
            raise StateMachineDefinitionError(f"{entity} transition table has unknown status key: {current!r}")
        row: dict[T, S] = {}
        for transition, target in edges.items():
            if not isinstance(transition, transition_enum):
                raise StateMachineDefinitionError(
                    f"{entity} transition table has unknown transition {transition!r} under {current.value}"
                )
            if not isinstance(target, status_enum):
                raise StateMachineDefinitionError(
                    f"{entity} transition {current.value} -> {transition.value} targets unknown status {target!r}"
                )
            row[transition] = target
        frozen[current] = MappingProxyType(row)
    return MappingProxyType(frozen)


class StateMachine(Generic[S, T]):
    """Immutable finite state machine over a status enum and a transition enum."""

    def __init__(
        self,
        entity: str,
        status_enum: type[S],
        transition_enum: type[T],
        transitions: Mapping[S, Mapping[T, S]],
        initial_status: S,
        status_labels: Mapping[S, str] | None = None,
        transition_labels: Mapping[T, str] | None = None,
    ) -> None:
        self.entity = entity
        self.status_enum = status_enum
        self.transition_enum = transition_enum
        self._transitions = _freeze_table(entity, status_enum, transition_enum, transitions)
        if not isinstance(initial_status, status_enum):
            raise StateMachineDefinitionError(f"{entity} initial status {initial_status!r} is not a status value")
        self.initial_status = initial_status
        self._status_labels: Mapping[S, str] = MappingProxyType(dict(status_labels or {}))
        self._transition_labels: Mapping[T, str] = MappingProxyType(dict(transition_labels or {}))

    def __repr__(self) -> str:
        return f"StateMachine(entity={self.entity!r}, statuses={len(self._transitions)})"

    @property
    def transitions(self) -> Mapping[S, Mapping[T, S]]:
        return self._transitions

    def parse_status(self, value: S | str) -> S:
        """Coerce a raw status (e.g. read from storage) into the status enum."""
        if isinstance(value, self.status_enum):
            return value
        try:
            return self.status_enum(value)
        except ValueError as exc:
            raise InvalidStatusValueError(self.entity, value) from exc

    def parse_transition(self, value: T | str) -> T:
        """Coerce a raw transition (e.g. from a request body) into the transition enum."""
        if isinstance(value, self.transition_enum):
            return value
        try:
            return self.transition_enum(value)
        except ValueError as exc:
            raise InvalidTransitionValueError(self.entity, value) from exc

    def is_valid_transition(self, current_status: S | str, transition: T | str) -> bool:
        row = self._transitions[self.parse_status(current_status)]
        return self.parse_transition(transition) in row

    def get_resulting_status(self, current_status: S | str, transition: T | str) -> S | None:
        """Return the status a transition leads to, or None when it is not allowed."""
        row = self._transitions[self.parse_status(current_status)]
        return row.get(self.parse_transition(transition))

    def transition(self, current_status: S | str, transition: T | str) -> TransitionOutcome[S]:
        current = self.parse_status(current_status)
        requested = self.parse_transition(transition)
        return TransitionOutcome(
            current_status=current,
            transition=requested,
            resulting_status=self._transitions[current].get(requested),
        )

    def assert_transition(self, current_status: S | str, transition: T | str) -> S:
        return self.transition(current_status, transition).unwrap()

    def valid_transitions(self, current_status: S | str) -> list[T]:
        row = self._transitions[self.parse_status(current_status)]
        return [transition for transition in self.transition_enum if transition in row]

    def is_terminal(self, status: S | str) -> bool:
        return not self._transitions[self.parse_status(status)]

    def terminal_statuses(self) -> list[S]:
        return [status for status, row in self._transitions.items() if not row]

    def find_transition(self, current_status: S | str, target_status: S | str) -> T | None:
        """Return the transition that moves `current_status` to `target_status`, if any."""
        target = self.parse_status(target_status)
        for transition, result in self._transitions[self.parse_status(current_status)].items():
            if result is target:
                return transition
        return None

    def reachable_statuses(self) -> set[S]:
        seen = {self.initial_status}
        queue = deque([self.initial_status])
        while queue:
            for target in self._transitions[queue.popleft()].values():
                if target not in seen:
                    seen.add(target)
                    queue.append(target)
        return seen

    def unreachable_statuses(self) -> list[S]:
        reachable = self.reachable_statuses()
        return [status for status in self.status_enum if status not in reachable]

    def display_label_for_status(self, status: S | str | None) -> str:
        """Human readable label for UI code. Never raises on bad historical data."""
        if status is None or status == "":
            self._warn_unknown_label("status", status)
            return UNKNOWN_STATUS_LABEL
        try:
            member = self.parse_status(status)
        except InvalidStatusValueError:
            self._warn_unknown_label("status", status)
            return str(status)
        return self._status_labels.get(member) or humanize(member.value)

    def display_label_for_transition(self, transition: T | str | None) -> str:
        if transition is None or transition == "":
            self._warn_unknown_label("transition", transition)
            return UNKNOWN_ACTION_LABEL
        try:
            member = self.parse_transition(transition)
        except InvalidTransitionValueError:
            self._warn_unknown_label("transition", transition)
            return str(transition)
        return self._transition_labels.get(member) or humanize(member.value)

    def _warn_unknown_label(self, kind: str, value: Any) -> None:
        logger.warning(
            "status.display_label.unknown",
            extra={"event": "status.display_label.unknown", "entity": self.entity, "kind": kind, "value": value},
        )

    def describe(self) -> dict[str, Any]:
        """JSON-ready description shared with client code."""
        return {
            "entity": self.entity,
            "initial_status": self.initial_status.value,
            "statuses": [
                {
                    "value": status.value,
                    "label": self.display_label_for_status(status),
                    "terminal": self.is_terminal(status),
                }
                for status in self.status_enum
            ],
            "transitions": [
                {"value": transition.value, "label": self.display_label_for_transition(transition)}
                for transition in self.transition_enum
            ],
            "table": {
                status.value: {transition.value: target.value for transition, target in row.items()}
                for status, row in self._transitions.items()
            },
        }
