"""Common schema module."""

from __future__ import annotations

from pydantic import BaseModel

from marketplace.core.exceptions import MarketplaceException


class ErrorEnvelope(BaseModel):
    status: str = "error"
    status_code: int
    error_code: str
    detail: str

    @classmethod
    def from_exception(cls, exc: Exception) -> "ErrorEnvelope":
        if isinstance(exc, MarketplaceException):
            return cls(status_code=exc.status_code, error_code=exc.error_code, detail=str(exc))
        return cls(status_code=500, error_code="internal_error", detail="Internal server error.")
