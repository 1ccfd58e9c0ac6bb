"""Custom exceptions for the lesson marketplace."""

from __future__ import annotations


class MarketplaceException(Exception):
    """Base exception for the marketplace application."""

    status_code: int = 500
    error_code: str = "internal_error"


class ValidationError(MarketplaceException):
    """Raised when client input fails validation."""

    status_code = 400
    error_code = "validation_error"


class InvalidTransitionError(ValidationError):
    """Raised when a requested transition is not allowed from the current status."""

    error_code = "invalid_transition"

    def __init__(
        self,
        message: str,
        current_status: str | None = None,
        transition: str | None = None,
        target_status: str | None = None,
    ) -> None:
        self.current_status = current_status
        self.transition = transition
        self.target_status = target_status
        super().__init__(message)


class InvalidStatusValueError(MarketplaceException):
    """Raised when a status string is not a member of the entity's status enum."""

    status_code = 422
    error_code = "invalid_status_value"

    def __init__(self, entity: str, value: object) -> None:
        self.entity = entity
        self.value = value
        super().__init__(f"Invalid {entity} status value: {value}")


class InvalidTransitionValueError(MarketplaceException):
    """Raised when a transition string is not a member of the entity's transition enum."""

    status_code = 422
    error_code = "invalid_transition_value"

    def __init__(self, entity: str, value: object) -> None:
        self.entity = entity
        self.value = value
        super().__init__(f"Invalid {entity} status transition: {value}")


class NotFoundError(MarketplaceException):
    """Raised when a resource is not found."""

    status_code = 404
    error_code = "not_found"


class ConflictError(MarketplaceException):
    """Raised when an operation conflicts with existing state."""

    status_code = 409
    error_code = "conflict"


class ConfigurationError(MarketplaceException):
    """Raised when configuration is invalid."""

    error_code = "configuration_error"


class StateMachineDefinitionError(MarketplaceException):
    """Raised when a transition table is malformed."""

    error_code = "state_machine_definition_error"
