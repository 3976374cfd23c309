"""Utility functions for value objects."""

# Standard library imports
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any


def ensure_decimal(value: Decimal | float | int | str) -> Decimal:
    """Convert value to Decimal if not already.

    Args:
        value: Value to convert to Decimal

    Returns:
        Decimal representation of the value

    Raises:
        InvalidOperation: If the value cannot be parsed as a number
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_decimal_or_none(value: Any) -> Decimal | None:
    """Convert value to a finite Decimal, or None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        result = ensure_decimal(value)
    except (InvalidOperation, ValueError):
        return None
    return result if result.is_finite() else None


def is_integer(value: Any) -> bool:
    """Check for a real int (bool is rejected)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_blank(value: str | None) -> bool:
    """Check if a string is None, empty or whitespace only."""
    return value is None or not str(value).strip()


def is_empty_date(value: date | None) -> bool:
    """Check if a date is missing (None or the ``date.min`` placeholder)."""
    return value is None or value == date.min


def to_date(value: date) -> date:
    """Drop the time part of a datetime; plain dates are returned as is."""
    if isinstance(value, datetime):
        return value.date()
    return value


def format_number(value: Decimal | int, decimal_places: int = 0) -> str:
    """Format a number with space thousands separators and a decimal comma."""
    text = f"{value:,.{decimal_places}f}"
    return text.replace(",", " ").replace(".", ",")
