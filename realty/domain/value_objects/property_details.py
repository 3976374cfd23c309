"""Physical characteristics of a property."""

from __future__ import annotations

# Standard library imports
from typing import Any

from ..exceptions import ValidationError
from ..result import ERROR_SEPARATOR, Result
from .base import ValueObject
from .enums import PropertyType
from .measurements import Area, Floor, NumberOfRooms, TotalFloors
from .text import HeatingType, PropertyCondition
from .utils import is_integer


class PropertyDetails(ValueObject):
    """Immutable set of property characteristics.

    The nested values are validated by their own factories; this object adds the
    cross-field rule that an above-ground floor cannot exceed the building height.
    """

    __slots__ = (
        "_area",
        "_number_of_rooms",
        "_floor",
        "_total_floors",
        "_property_type",
        "_has_balcony",
        "_has_parking",
        "_heating_type",
        "_condition",
    )

    def __init__(
        self,
        area: Area,
        number_of_rooms: NumberOfRooms,
        floor: Floor,
        total_floors: TotalFloors,
        property_type: PropertyType,
        has_balcony: bool = False,
        has_parking: bool = False,
        heating_type: HeatingType | None = None,
        condition: PropertyCondition | None = None,
    ) -> None:
        errors = self.validate(area, number_of_rooms, floor, total_floors, property_type)
        if errors:
            raise ValidationError(ERROR_SEPARATOR.join(errors), field="PropertyDetails")
        self._area = area
        self._number_of_rooms = number_of_rooms
        self._floor = floor
        self._total_floors = total_floors
        self._property_type = property_type
        self._has_balcony = bool(has_balcony)
        self._has_parking = bool(has_parking)
        self._heating_type = heating_type or HeatingType.not_specified()
        self._condition = condition or PropertyCondition.not_specified()

    @staticmethod
    def validate(
        area: Area | None,
        number_of_rooms: NumberOfRooms | None,
        floor: Floor | None,
        total_floors: TotalFloors | None,
        property_type: PropertyType | None,
    ) -> list[str]:
        """Get the missing parts and cross-field violations."""
        errors = []
        if area is None:
            errors.append("Площадь не может быть пустой")
        if number_of_rooms is None:
            errors.append("Количество комнат не может быть пустым")
        if floor is None:
            errors.append("Этаж не может быть пустым")
        if total_floors is None:
            errors.append("Общее количество этажей не может быть пустым")
        if property_type is None:
            errors.append("Тип недвижимости не может быть пустым")
        elif not isinstance(property_type, PropertyType):
            errors.append(f"Неизвестный тип недвижимости: {property_type}")

        if floor is not None and total_floors is not None:
            if floor.value > 0 and floor.value > total_floors.value:
                errors.append(
                    f"Номер этажа ({floor.value}) не может быть больше "
                    f"общего количества этажей ({total_floors.value})"
                )
        return errors

    @classmethod
    def create(
        cls,
        area: Area | None,
        number_of_rooms: NumberOfRooms | None,
        floor: Floor | None,
        total_floors: TotalFloors | None,
        property_type: PropertyType | None,
        has_balcony: bool = False,
        has_parking: bool = False,
        heating_type: HeatingType | None = None,
        condition: PropertyCondition | None = None,
    ) -> Result[PropertyDetails]:
        """Assemble details from validated value objects.

        Heating type and condition are optional and default to the
        "not specified" placeholder.
        """
        return Result.from_errors(
            cls.validate(area, number_of_rooms, floor, total_floors, property_type),
            lambda: cls(
                area,  # type: ignore[arg-type]
                number_of_rooms,  # type: ignore[arg-type]
                floor,  # type: ignore[arg-type]
                total_floors,  # type: ignore[arg-type]
                property_type,  # type: ignore[arg-type]
                has_balcony,
                has_parking,
                heating_type,
                condition,
            ),
        )

    @classmethod
    def from_primitives(
        cls,
        area: int,
        number_of_rooms: int,
        floor: int,
        total_floors: int,
        property_type: PropertyType | str,
        has_balcony: bool = False,
        has_parking: bool = False,
        heating_type: str | None = None,
        condition: str | None = None,
    ) -> Result[PropertyDetails]:
        """Build every nested value object from raw input and collect all of their errors.

        Args:
            area: Area in square metres
            number_of_rooms: Room count
            floor: Floor number (negative for basements)
            total_floors: Number of floors in the building
            property_type: PropertyType or a name understood by ``PropertyType.parse``
            has_balcony: Balcony flag
            has_parking: Parking flag
            heating_type: Heating description (optional)
            condition: Condition description (optional)

        Returns:
            Result with the details or every error of every part
        """
        if isinstance(property_type, str):
            parsed_type = PropertyType.parse(property_type)
        else:
            parsed_type = property_type

        parts = (
            Area.create(area),
            NumberOfRooms.create(number_of_rooms),
            TotalFloors.create(total_floors),
            Floor.create(floor, total_floors if is_integer(total_floors) else None),
            HeatingType.create(heating_type),
            PropertyCondition.create(condition),
        )
        errors = [error for part in parts for error in part.errors]
        if parsed_type is None:
            errors.append(f"Неизвестный тип недвижимости: {property_type}")
        if errors:
            return Result.failure(errors)

        area_vo, rooms_vo, total_vo, floor_vo, heating_vo, condition_vo = (
            part.value for part in parts
        )
        return cls.create(
            area_vo,
            rooms_vo,
            floor_vo,
            total_vo,
            parsed_type,
            has_balcony,
            has_parking,
            heating_vo,
            condition_vo,
        )

    @property
    def area(self) -> Area:
        return self._area

    @property
    def number_of_rooms(self) -> NumberOfRooms:
        return self._number_of_rooms

    @property
    def floor(self) -> Floor:
        return self._floor

    @property
    def total_floors(self) -> TotalFloors:
        return self._total_floors

    @property
    def property_type(self) -> PropertyType:
        return self._property_type

    @property
    def has_balcony(self) -> bool:
        return self._has_balcony

    @property
    def has_parking(self) -> bool:
        return self._has_parking

    @property
    def heating_type(self) -> HeatingType:
        return self._heating_type

    @property
    def condition(self) -> PropertyCondition:
        return self._condition

    def room_area(self) -> int:
        """Get the average area per room, or 0 when it cannot be computed."""
        rooms = self._number_of_rooms.value
        if rooms > 0 and self._area.value > rooms:
            return self._area.value // rooms
        return 0

    def _components(self) -> tuple[Any, ...]:
        return (
            self._area,
            self._number_of_rooms,
            self._floor,
            self._total_floors,
            self._property_type,
            self._has_balcony,
            self._has_parking,
            self._heating_type,
            self._condition,
        )

    def __str__(self) -> str:
        return (
            f"{self._property_type.display_name}, {self._area}, {self._number_of_rooms}, "
            f"{self._floor} из {self._total_floors.value}"
        )
