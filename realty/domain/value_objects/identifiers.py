"""Typed identifiers for the domain entities.

Each entity gets its own id type so that, for example, a ClientId can never be
passed where a PropertyId is expected or compare equal to one.
"""

from __future__ import annotations

# Standard library imports
from typing import Any, Self
from uuid import UUID, uuid4

from ..exceptions import ValidationError
from ..result import Result
from .base import SingleValueObject

_EMPTY_ID_MESSAGE = "ID не может быть пустым"


class TypedId(SingleValueObject):
    """Base class for UUID-backed entity identifiers."""

    __slots__ = ()

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        if not isinstance(value, UUID):
            return [f"{cls.__name__} должен быть UUID"]
        if value.int == 0:
            return [_EMPTY_ID_MESSAGE]
        return []

    @classmethod
    def new(cls) -> Self:
        """Generate a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def create(cls, value: Any) -> Result[Self]:
        """Wrap an existing identifier.

        Args:
            value: A UUID or its string form

        Returns:
            Result with the typed id, or a failure for empty or malformed input
        """
        if isinstance(value, str):
            try:
                value = UUID(value.strip())
            except ValueError:
                return Result.failure(f"Некорректный формат {cls.__name__}: {value}")
        if value is None:
            return Result.failure(_EMPTY_ID_MESSAGE)
        return super().create(value)

    @classmethod
    def parse(cls, value: str) -> Self:
        """Wrap a string identifier or raise.

        Raises:
            ValidationError: If the string is not a non-empty UUID
        """
        result = cls.create(value)
        if result.is_failure:
            raise ValidationError(result.error, field=cls.__name__, value=value)
        return result.value

    @property
    def value(self) -> UUID:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self._value}')"


class AgencyId(TypedId):
    __slots__ = ()


class PropertyId(TypedId):
    __slots__ = ()


class ClientId(TypedId):
    __slots__ = ()


class BookingId(TypedId):
    __slots__ = ()


class DealId(TypedId):
    __slots__ = ()


class CompletedDealId(TypedId):
    __slots__ = ()
