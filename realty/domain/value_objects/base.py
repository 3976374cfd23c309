"""Base class for value objects."""

# Standard library imports
from abc import ABC, abstractmethod
from functools import total_ordering
from typing import Any, Self

from ..exceptions import ValidationError
from ..result import ERROR_SEPARATOR, Result


class ValueObject(ABC):
    """Abstract base class for all value objects.

    Provides common functionality for value objects including:
    - Immutability enforcement
    - Equality comparison over ``_components()``
    - Hashability
    """

    __slots__ = ()  # Subclasses should define their own __slots__

    @abstractmethod
    def _components(self) -> tuple[Any, ...]:
        """Get the values that define this object's identity."""

    def __eq__(self, other: object) -> bool:
        """Check equality with another value object of the same type."""
        if type(other) is not type(self):
            return False
        return self._components() == other._components()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        """Get hash for use in sets/dicts."""
        return hash((type(self).__name__, self._components()))

    def __repr__(self) -> str:
        """Get string representation for debugging."""
        args = ", ".join(repr(component) for component in self._components())
        return f"{type(self).__name__}({args})"

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent modification after initialization."""
        if hasattr(self, name):
            raise AttributeError(f"Cannot modify immutable value object attribute '{name}'")
        super().__setattr__(name, value)


@total_ordering
class ComparableValueObject(ValueObject):
    """Base class for value objects that support comparison operations.

    Subclasses need only implement __lt__ thanks to @total_ordering.
    """

    __slots__ = ()

    @abstractmethod
    def __lt__(self, other: Self) -> bool:
        """Check if less than another value object."""


class SingleValueObject(ComparableValueObject):
    """Value object wrapping exactly one primitive exposed through ``value``.

    Subclasses implement ``validate`` (returning every violated rule) and may
    override ``_normalize`` to trim or convert the raw input. ``create`` is the
    non-raising entry point; calling the constructor with invalid input raises
    ``ValidationError``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        errors = self.validate(value)
        if errors:
            raise ValidationError(
                ERROR_SEPARATOR.join(errors), field=type(self).__name__, value=value
            )
        self._value = self._normalize(value)

    @classmethod
    @abstractmethod
    def validate(cls, value: Any) -> list[str]:
        """Get the list of rules ``value`` violates (empty when valid)."""

    @classmethod
    def _normalize(cls, value: Any) -> Any:
        return value

    @classmethod
    def create(cls, value: Any) -> Result[Self]:
        """Validate ``value`` and wrap it.

        Returns:
            Successful result with the value object, or a failure listing all
            violated rules
        """
        return Result.from_errors(cls.validate(value), lambda: cls(value))

    @property
    def value(self) -> Any:
        """Get the wrapped value."""
        return self._value

    def _components(self) -> tuple[Any, ...]:
        return (self._value,)

    def __lt__(self, other: Self) -> bool:
        """Compare by wrapped value."""
        if type(other) is not type(self):
            raise TypeError(f"Cannot compare {type(self).__name__} and {type(other).__name__}")
        return self._value < other._value

    def __str__(self) -> str:
        return str(self._value)
