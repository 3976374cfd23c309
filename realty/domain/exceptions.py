"""
Domain-level exceptions for the real-estate model.

Expected bad input is reported through ``Result`` objects returned by factory
methods. The exceptions below signal contract violations: a caller passed
``None`` where an object is required, unwrapped a failed result, or attempted a
lifecycle transition the entity does not allow.
"""

from typing import Any
from uuid import UUID


class DomainException(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(DomainException):
    """Exception raised when domain validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        constraint: str | None = None,
    ) -> None:
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        if constraint:
            details["constraint"] = constraint

        super().__init__(message, details)
        self.field = field
        self.value = value
        self.constraint = constraint


class RequiredArgumentError(DomainException):
    """
    Raised when a required object reference is missing.

    Indicates a bug in the calling code rather than a data-quality problem.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        if message is None:
            message = f"Argument '{argument}' is required"

        super().__init__(message, details={"argument": argument})
        self.argument = argument


class InvalidStateTransitionError(DomainException):
    """Raised when an entity cannot move from its current state to the requested one."""

    def __init__(
        self,
        entity_type: str,
        entity_id: UUID | str | None,
        current_state: str,
        attempted_state: str,
    ) -> None:
        message = (
            f"Невозможно перевести {entity_type} из состояния '{current_state}' "
            f"в состояние '{attempted_state}'"
        )

        super().__init__(
            message,
            details={
                "entity_type": entity_type,
                "entity_id": str(entity_id) if entity_id else None,
                "current_state": current_state,
                "attempted_state": attempted_state,
            },
        )
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.current_state = current_state
        self.attempted_state = attempted_state


def require(value: Any, argument: str, message: str | None = None) -> None:
    """Raise RequiredArgumentError if ``value`` is None."""
    if value is None:
        raise RequiredArgumentError(argument, message)
