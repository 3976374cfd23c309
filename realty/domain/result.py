"""Result type returned by every domain factory method."""

from __future__ import annotations

# Standard library imports
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import ValidationError

T = TypeVar("T")

ERROR_SEPARATOR = "; "


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a factory call: a validated value or the list of rule violations.

    Factories never raise for bad input. They collect every violated rule and
    return them together so callers can report all problems at once.
    """

    is_success: bool
    errors: tuple[str, ...] = ()
    _value: T | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        """Create a successful result wrapping ``value``."""
        return cls(is_success=True, _value=value)

    @classmethod
    def failure(cls, errors: str | Iterable[str]) -> Result[T]:
        """Create a failed result.

        Args:
            errors: A single message or an ordered collection of messages

        Raises:
            ValueError: If no error message is given
        """
        collected = (errors,) if isinstance(errors, str) else tuple(errors)
        if not collected:
            raise ValueError("A failed result needs at least one error message")
        return cls(is_success=False, errors=collected)

    @classmethod
    def from_errors(cls, errors: Iterable[str], build: Callable[[], T]) -> Result[T]:
        """Fail with ``errors`` if there are any, otherwise succeed with ``build()``.

        ``build`` is only called when validation passed.
        """
        collected = tuple(errors)
        if collected:
            return cls.failure(collected)
        return cls.success(build())

    @property
    def is_failure(self) -> bool:
        """Check if the result carries errors."""
        return not self.is_success

    @property
    def error(self) -> str:
        """Get all error messages joined into one line."""
        return ERROR_SEPARATOR.join(self.errors)

    @property
    def value(self) -> T:
        """Get the wrapped value.

        Raises:
            ValidationError: If the result is a failure
        """
        if self.is_failure:
            raise ValidationError(self.error, constraint="result is a failure")
        return self._value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Get the wrapped value, or ``default`` on failure."""
        return self._value if self.is_success else default  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self.error!r})"
