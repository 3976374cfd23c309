"""Price value object for property and deal amounts."""

from __future__ import annotations

# Standard library imports
from decimal import Decimal
from typing import Any

from ..constants import CURRENCY_SYMBOL
from .base import SingleValueObject
from .utils import format_number, to_decimal_or_none


class Price(SingleValueObject):
    """Immutable value object representing a positive price in roubles."""

    __slots__ = ()

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        amount = to_decimal_or_none(value)
        if amount is None:
            return ["Цена должна быть числом"]
        if amount <= 0:
            return ["Цена не может быть нулевой, отрицательной или отсутствовать"]
        return []

    @classmethod
    def _normalize(cls, value: Any) -> Decimal:
        return to_decimal_or_none(value)  # type: ignore[return-value]

    @property
    def value(self) -> Decimal:
        """Get the decimal value."""
        return self._value

    def with_value(self, value: Decimal | float | int | str) -> Price:
        """Create a new Price with a different amount.

        Raises:
            ValidationError: If the new amount is not positive
        """
        return type(self)(value)

    def difference(self, other: Price) -> Decimal:
        """Get the signed difference ``self - other``."""
        if not isinstance(other, Price):
            raise TypeError(f"Cannot calculate difference with {type(other)}")
        return self._value - other._value

    def to_string(self, decimal_places: int = 2) -> str:
        """Format the price as currency, e.g. ``5 000 000,00 ₽``."""
        return f"{format_number(self._value, decimal_places)} {CURRENCY_SYMBOL}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Price({self._value})"
