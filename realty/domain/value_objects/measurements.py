"""Integer measurements of a property: area, rooms and floors."""

from __future__ import annotations

# Standard library imports
from typing import Any, Self

from ..constants import AREA_MAX, FLOOR_MAX, FLOOR_MIN, ROOMS_MAX, TOTAL_FLOORS_MAX
from ..exceptions import ValidationError
from ..result import ERROR_SEPARATOR, Result
from .base import SingleValueObject
from .utils import format_number, is_integer


class Area(SingleValueObject):
    """Total area in whole square metres."""

    __slots__ = ()

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        if not is_integer(value):
            return ["Площадь должна быть целым числом"]
        errors = []
        if value <= 0:
            errors.append("Площадь должна быть положительной")
        if value > AREA_MAX:
            errors.append(f"Площадь не может превышать {AREA_MAX} кв. м")
        return errors

    @property
    def value(self) -> int:
        return self._value

    def __str__(self) -> str:
        return f"{format_number(self._value)} м²"


class NumberOfRooms(SingleValueObject):
    """Room count; zero is valid for studios and land plots."""

    __slots__ = ()

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        if not is_integer(value):
            return ["Количество комнат должно быть целым числом"]
        errors = []
        if value < 0:
            errors.append("Количество комнат не может быть отрицательным")
        if value > ROOMS_MAX:
            errors.append(f"Количество комнат не может превышать {ROOMS_MAX}")
        return errors

    @property
    def value(self) -> int:
        return self._value

    def __str__(self) -> str:
        return f"{self._value} комн."


class TotalFloors(SingleValueObject):
    """Number of floors in the building."""

    __slots__ = ()

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        if not is_integer(value):
            return ["Общее количество этажей должно быть целым числом"]
        errors = []
        if value <= 0:
            errors.append("Общее количество этажей должно быть положительным числом")
        if value > TOTAL_FLOORS_MAX:
            errors.append(f"Общее количество этажей не может превышать {TOTAL_FLOORS_MAX}")
        return errors

    @property
    def value(self) -> int:
        return self._value

    def __str__(self) -> str:
        return f"{self._value} эт."


class Floor(SingleValueObject):
    """Floor number within a building.

    Zero is the ground (plinth) floor and negative numbers are basement levels,
    down to -10. Basement levels are never checked against the building height.
    """

    __slots__ = ()

    def __init__(self, value: Any, total_floors: TotalFloors | int | None = None) -> None:
        errors = self.validate(value, total_floors)
        if errors:
            raise ValidationError(ERROR_SEPARATOR.join(errors), field="Floor", value=value)
        self._value = value

    @classmethod
    def validate(cls, value: Any, total_floors: TotalFloors | int | None = None) -> list[str]:
        if not is_integer(value):
            return ["Номер этажа должен быть целым числом"]

        limit = total_floors.value if isinstance(total_floors, TotalFloors) else total_floors
        errors = []
        if value < FLOOR_MIN:
            errors.append(
                f"Номер этажа не может быть меньше {FLOOR_MIN} (слишком глубокий подвал)"
            )
        if limit is not None and value > 0 and value > limit:
            errors.append(
                f"Номер этажа ({value}) не может быть больше общего количества этажей ({limit})"
            )
        if value > FLOOR_MAX:
            errors.append(f"Номер этажа не может превышать {FLOOR_MAX}")
        return errors

    @classmethod
    def create(cls, value: Any, total_floors: TotalFloors | int | None = None) -> Result[Self]:
        """Validate a floor number, optionally against the building height.

        Args:
            value: Floor number
            total_floors: Number of floors in the building (optional)

        Returns:
            Result with the Floor or the list of violated rules
        """
        return Result.from_errors(
            cls.validate(value, total_floors), lambda: cls(value, total_floors)
        )

    @property
    def value(self) -> int:
        return self._value

    def is_basement(self) -> bool:
        """Check if the floor is below ground level."""
        return self._value < 0

    def __str__(self) -> str:
        if self._value < 0:
            return f"{abs(self._value)} подвальный этаж"
        if self._value == 0:
            return "Цокольный этаж"
        return f"{self._value} этаж"
