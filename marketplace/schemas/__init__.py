"""Pydantic schema package for status workflow contracts."""

from marketplace.schemas.common import ErrorEnvelope
from marketplace.schemas.status import StatusChangeRequest, StatusRecordResponse, StatusTransitionRequest

__all__ = [
    "ErrorEnvelope",
    "StatusChangeRequest",
    "StatusRecordResponse",
    "StatusTransitionRequest",
]
