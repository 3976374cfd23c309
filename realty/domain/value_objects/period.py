"""Period value object: a closed date interval."""

from __future__ import annotations

# Standard library imports
from datetime import date, timedelta
from typing import Any

from ..constants import DATE_FORMAT, PERIOD_MAX_YEARS
from ..exceptions import ValidationError
from ..result import ERROR_SEPARATOR, Result
from .base import ValueObject
from .utils import is_empty_date


class Period(ValueObject):
    """Immutable closed interval ``[start_date, end_date]`` of calendar days."""

    __slots__ = ("_start_date", "_end_date")

    def __init__(self, start_date: date, end_date: date) -> None:
        """Initialize Period with validation.

        Args:
            start_date: First day of the period
            end_date: Last day of the period

        Raises:
            ValidationError: If the dates do not form a valid period
        """
        errors = self.validate(start_date, end_date)
        if errors:
            raise ValidationError(ERROR_SEPARATOR.join(errors), field="Period")
        self._start_date = start_date
        self._end_date = end_date

    @staticmethod
    def validate(start_date: date | None, end_date: date | None) -> list[str]:
        """Get every rule the two dates violate."""
        errors = []
        if is_empty_date(start_date):
            errors.append("Дата начала не может быть пустой")
        if is_empty_date(end_date):
            errors.append("Дата окончания не может быть пустой")
        if start_date is None or end_date is None:
            return errors

        if start_date > end_date:
            errors.append("Дата начала не может быть позже даты окончания")
        if end_date.year - start_date.year > PERIOD_MAX_YEARS:
            errors.append(
                f"Период не может быть слишком большим (более {PERIOD_MAX_YEARS} лет)"
            )
        return errors

    @classmethod
    def create(cls, start_date: date | None, end_date: date | None) -> Result[Period]:
        """Validate the dates and build a Period.

        Returns:
            Result with the Period or all violated rules joined by ``"; "``
        """
        return Result.from_errors(
            cls.validate(start_date, end_date),
            lambda: cls(start_date, end_date),  # type: ignore[arg-type]
        )

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def end_date(self) -> date:
        return self._end_date

    @property
    def duration(self) -> timedelta:
        """Get the time between start and end."""
        return self._end_date - self._start_date

    def contains(self, day: date) -> bool:
        """Check if ``day`` falls inside the period (bounds included)."""
        return self._start_date <= day <= self._end_date

    def overlaps(self, other: Period) -> bool:
        """Check if two periods share at least one day."""
        if not isinstance(other, Period):
            raise TypeError(f"Cannot compare Period and {type(other)}")
        return self._start_date <= other._end_date and other._start_date <= self._end_date

    def _components(self) -> tuple[Any, ...]:
        return (self._start_date, self._end_date)

    def __str__(self) -> str:
        return (
            f"Период с {self._start_date.strftime(DATE_FORMAT)} "
            f"по {self._end_date.strftime(DATE_FORMAT)}"
        )
