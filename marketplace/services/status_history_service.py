"""Append-only status history with a current-status pointer per owning entity."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from threading import RLock
from typing import Any, Generic, TypeVar

from pydantic import JsonValue

from marketplace.core.exceptions import ConflictError, InvalidTransitionError, NotFoundError, ValidationError
from marketplace.models.base import StatusRecord
from marketplace.utils.ids import new_status_id

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=StatusRecord)


class StatusHistoryService(Generic[R]):
    """In-memory status registry placeholder until DB-backed status tables land.

    Reading the current status, validating the transition, appending the new
    record and moving the current pointer happen under one lock, which is the
    same unit a database integration must run in a single transaction.

    Stored records never leave the service: callers get deep copies, so
    editing a returned `context` cannot rewrite history.
    """

    def __init__(self, record_type: type[R], id_factory: Callable[[], str] = new_status_id) -> None:
        self.record_type = record_type
        self.machine = record_type.machine
        self._id_factory = id_factory
        self._history: dict[str, list[R]] = {}
        self._current: dict[str, R] = {}
        self._lock = RLock()

    @property
    def entity(self) -> str:
        return self.machine.entity

    def initialize(self, owner_id: str, context: JsonValue = None) -> R:
        """Record the initial status for a newly created entity."""
        with self._lock:
            if owner_id in self._history:
                raise ConflictError(f"{self.entity} {owner_id} already has a status history.")
            record = self.record_type.create(self._id_factory(), owner_id, self.machine.initial_status, context)
            self._append(owner_id, record)
        logger.info(
            "status.initialized",
            extra={"event": "status.initialized", "entity": self.entity, "owner_id": owner_id, "status": record.status.value},
        )
        return _detached(record)

    def load(self, owner_id: str, rows: Iterable[Mapping[str, Any]]) -> R:
        """Rehydrate an entity's history from stored rows and return its current record."""
        records = sorted((self.record_type.from_db(row) for row in rows), key=lambda record: record.created_at)
        if not records:
            raise ValidationError(f"No status rows supplied for {self.entity} {owner_id}.")
        for record in records:
            if record.owner_id != owner_id:
                raise ValidationError(f"Status {record.id} belongs to {self.entity} {record.owner_id}, not {owner_id}.")
        with self._lock:
            if owner_id in self._history:
                raise ConflictError(f"{self.entity} {owner_id} already has a status history.")
            for record in records:
                self._append(owner_id, record)
            return _detached(records[-1])

    def current(self, owner_id: str) -> R | None:
        with self._lock:
            record = self._current.get(owner_id)
            return _detached(record) if record is not None else None

    def history(self, owner_id: str) -> list[R]:
        with self._lock:
            return [_detached(record) for record in self._history.get(owner_id, [])]

    def available_transitions(self, owner_id: str) -> list:
        with self._lock:
            return self.machine.valid_transitions(self._require_current(owner_id).status)

    def apply_transition(self, owner_id: str, transition: Any, context: JsonValue = None) -> R:
        """Validate `transition` against the current status and append the resulting record."""
        with self._lock:
            current = self._require_current(owner_id)
            outcome = self.machine.transition(current.status, transition)
            if not outcome.is_valid:
                self._log_rejected(owner_id, current, transition=outcome.transition.value)
                raise InvalidTransitionError(
                    outcome.message or "",
                    current_status=current.status.value,
                    transition=outcome.transition.value,
                )
            record = self.record_type.create(self._id_factory(), owner_id, outcome.resulting_status, context)
            self._append(owner_id, record)

        logger.info(
            "status.transition.applied",
            extra={
                "event": "status.transition.applied",
                "entity": self.entity,
                "owner_id": owner_id,
                "from_status": current.status.value,
                "transition": outcome.transition.value,
                "status": record.status.value,
            },
        )
        return _detached(record)

    def change_status(self, owner_id: str, target_status: Any, context: JsonValue = None) -> R:
        """Move to `target_status` through whichever transition leads there."""
        with self._lock:
            current = self._require_current(owner_id)
            target = self.machine.parse_status(target_status)
            transition = self.machine.find_transition(current.status, target)
            if transition is None:
                self._log_rejected(owner_id, current, target_status=target.value)
                raise InvalidTransitionError(
                    f"Transition from {current.status.value} to {target.value} is not defined.",
                    current_status=current.status.value,
                    target_status=target.value,
                )
            return self.apply_transition(owner_id, transition, context)

    def _log_rejected(self, owner_id: str, current: R, **requested: str) -> None:
        logger.warning(
            "status.transition.rejected",
            extra={
                "event": "status.transition.rejected",
                "entity": self.entity,
                "owner_id": owner_id,
                "status": current.status.value,
                **requested,
            },
        )

    def _require_current(self, owner_id: str) -> R:
        record = self._current.get(owner_id)
        if record is None:
            raise NotFoundError(f"{self.entity} not found: {owner_id}")
        return record

    def _append(self, owner_id: str, record: R) -> None:
        # Detach from the caller's context object before it becomes history.
        stored = _detached(record)
        self._history.setdefault(owner_id, []).append(stored)
        self._current[owner_id] = stored


def _detached(record: R) -> R:
    return record.model_copy(deep=True)
