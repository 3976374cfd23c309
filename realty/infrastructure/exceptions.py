"""
Infrastructure-specific exceptions for the real-estate model.

Domain errors live in ``realty.domain.exceptions``; the classes below cover
problems with the environment the model runs in.
"""

from typing import Any


class InfrastructureException(Exception):
    """Base exception for all infrastructure-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(InfrastructureException):
    """Raised when a configuration value is invalid."""

    def __init__(self, config_key: str, value: Any, reason: str) -> None:
        message = f"Invalid configuration {config_key}={value}: {reason}"
        details = {"config_key": config_key, "value": str(value), "reason": reason}
        super().__init__(message, details)
        self.config_key = config_key
        self.value = value
        self.reason = reason
