"""Status change request and response contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, JsonValue

from marketplace.models.base import StatusRecord


class StatusTransitionRequest(BaseModel):
    """Body of a request that names the transition to apply, e.g. ``{"transition": "COMPLETE"}``."""

    transition: str = Field(min_length=1, max_length=64)
    context: JsonValue = None


class StatusChangeRequest(BaseModel):
    """Body of a request that names the target status, e.g. ``{"status": "ACHIEVED"}``."""

    status: str = Field(min_length=1, max_length=64)
    context: JsonValue = None


class StatusRecordResponse(BaseModel):
    id: str
    entity: str
    owner_id: str
    status: str
    status_label: str
    context: JsonValue = None
    created_at: datetime

    @classmethod
    def from_record(cls, record: StatusRecord) -> "StatusRecordResponse":
        return cls(
            id=record.id,
            entity=record.machine.entity,
            owner_id=record.owner_id,
            status=getattr(record, "status").value,
            status_label=record.status_label(),
            context=record.get_context(),
            created_at=record.created_at,
        )
