"""Shared immutable status-record base for lifecycle entities."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, ClassVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator
from pydantic.alias_generators import to_camel

from marketplace.core.exceptions import InvalidStatusValueError, ValidationError
from marketplace.workflow.state_machine import StateMachine

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp helper."""
    return datetime.now(timezone.utc)


class StatusRecord(BaseModel):
    """One append-only snapshot in an entity's status history.

    Subclasses add the owning-entity key named by `owner_field` and narrow
    `status` to their enum. Only type shape is checked here; the caller must
    already have validated the transition against `machine`.
    """

    # Storage rows may use camelCase keys; Python callers use field names.
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    owner_field: ClassVar[str]
    machine: ClassVar[StateMachine]

    id: str
    context: JsonValue = None
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Storage drivers commonly hand back naive UTC timestamps.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def owner_id(self) -> str:
        return getattr(self, self.owner_field)

    @classmethod
    def create(cls, id: str, owner_id: str, status: Any, context: JsonValue = None) -> "StatusRecord":
        return cls(**{"id": id, cls.owner_field: owner_id, "status": status, "context": context})

    @classmethod
    def from_db(cls, row: Mapping[str, Any]) -> "StatusRecord":
        """Build a record from a storage row, refusing unknown status values and malformed rows."""
        try:
            status = cls.machine.parse_status(row.get("status"))
        except InvalidStatusValueError:
            logger.error(
                "status.record.invalid_status",
                extra={
                    "event": "status.record.invalid_status",
                    "entity": cls.machine.entity,
                    "record_id": row.get("id"),
                    "value": str(row.get("status")),
                },
            )
            raise
        data = {key: value for key, value in row.items() if value is not None}
        data["status"] = status
        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as exc:
            fields = sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})
            logger.error(
                "status.record.invalid_row",
                extra={
                    "event": "status.record.invalid_row",
                    "entity": cls.machine.entity,
                    "record_id": row.get("id"),
                    "fields": fields,
                },
            )
            raise ValidationError(
                f"Invalid {cls.machine.entity} status row {row.get('id')}: bad or missing {', '.join(fields)}"
            ) from exc

    def get_context(self) -> JsonValue:
        """Return the context, decoding it when it was stored as a JSON string."""
        if not isinstance(self.context, str):
            return self.context
        try:
            return json.loads(self.context)
        except json.JSONDecodeError:
            logger.warning(
                "status.record.context_unparseable",
                extra={"event": "status.record.context_unparseable", "entity": self.machine.entity, "record_id": self.id},
            )
            return self.context

    def status_label(self) -> str:
        return self.machine.display_label_for_status(getattr(self, "status"))

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
