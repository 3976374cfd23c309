"""Client search preferences."""

from __future__ import annotations

# Standard library imports
from typing import Any

from ..result import Result
from .base import ValueObject
from .enums import PropertyType
from .measurements import Area, Floor, NumberOfRooms, TotalFloors
from .text import HeatingType, PropertyCondition


class ClientSearchCriteria(ValueObject):
    """Immutable set of optional preferences a client has for a property.

    Every field may be None, meaning "no preference".
    """

    __slots__ = (
        "_area",
        "_number_of_rooms",
        "_floor",
        "_total_floors",
        "_property_type",
        "_balcony",
        "_parking",
        "_heating_type",
        "_condition",
    )

    def __init__(
        self,
        area: Area | None = None,
        number_of_rooms: NumberOfRooms | None = None,
        floor: Floor | None = None,
        total_floors: TotalFloors | None = None,
        property_type: PropertyType | None = None,
        balcony: bool | None = None,
        parking: bool | None = None,
        heating_type: HeatingType | None = None,
        condition: PropertyCondition | None = None,
    ) -> None:
        self._area = area
        self._number_of_rooms = number_of_rooms
        self._floor = floor
        self._total_floors = total_floors
        self._property_type = property_type
        self._balcony = balcony
        self._parking = parking
        self._heating_type = heating_type
        self._condition = condition

    @classmethod
    def create(cls, **preferences: Any) -> Result[ClientSearchCriteria]:
        """Build criteria from keyword preferences; always succeeds."""
        return Result.success(cls(**preferences))

    @property
    def area(self) -> Area | None:
        return self._area

    @property
    def number_of_rooms(self) -> NumberOfRooms | None:
        return self._number_of_rooms

    @property
    def floor(self) -> Floor | None:
        return self._floor

    @property
    def total_floors(self) -> TotalFloors | None:
        return self._total_floors

    @property
    def property_type(self) -> PropertyType | None:
        return self._property_type

    @property
    def balcony(self) -> bool | None:
        return self._balcony

    @property
    def parking(self) -> bool | None:
        return self._parking

    @property
    def heating_type(self) -> HeatingType | None:
        return self._heating_type

    @property
    def condition(self) -> PropertyCondition | None:
        return self._condition

    def is_empty(self) -> bool:
        """Check if no preference is set."""
        return all(component is None for component in self._components())

    def _components(self) -> tuple[Any, ...]:
        return (
            self._area,
            self._number_of_rooms,
            self._floor,
            self._total_floors,
            self._property_type,
            self._balcony,
            self._parking,
            self._heating_type,
            self._condition,
        )

    def __str__(self) -> str:
        labels = (
            ("Площадь", self._area),
            ("Комнат", self._number_of_rooms),
            ("Этаж", self._floor),
            ("Этажей", self._total_floors),
            ("Тип", self._property_type),
            ("Балкон", self._balcony),
            ("Парковка", self._parking),
            ("Отопление", self._heating_type),
            ("Состояние", self._condition),
        )
        parts = [f"{label}: {value}" for label, value in labels if value is not None]
        return ", ".join(parts) if parts else "Нет критериев"
