"""Enumerations for property classification and listing status."""

from __future__ import annotations

# Standard library imports
from enum import Enum


class PropertyType(Enum):
    """Property type enumeration"""

    APARTMENT = "apartment"
    HOUSE = "house"
    COMMERCIAL = "commercial"
    LAND = "land"
    TOWNHOUSE = "townhouse"
    STUDIO = "studio"

    @property
    def display_name(self) -> str:
        return _PROPERTY_TYPE_NAMES[self]

    @classmethod
    def parse(cls, value: str | None) -> PropertyType | None:
        """Parse an English or Russian type name.

        Args:
            value: Name such as ``"apartment"``, ``"Квартира"`` or ``"участок"``

        Returns:
            Matching PropertyType, or None when the name is unknown
        """
        if value is None or not value.strip():
            return None
        return _PROPERTY_TYPE_ALIASES.get(value.strip().lower())

    def __str__(self) -> str:
        return self.display_name


_PROPERTY_TYPE_NAMES = {
    PropertyType.APARTMENT: "Квартира",
    PropertyType.HOUSE: "Дом",
    PropertyType.COMMERCIAL: "Коммерческое помещение",
    PropertyType.LAND: "Земельный участок",
    PropertyType.TOWNHOUSE: "Таунхаус",
    PropertyType.STUDIO: "Студия",
}

_PROPERTY_TYPE_ALIASES = {
    "квартира": PropertyType.APARTMENT,
    "apartment": PropertyType.APARTMENT,
    "дом": PropertyType.HOUSE,
    "house": PropertyType.HOUSE,
    "коммерческое помещение": PropertyType.COMMERCIAL,
    "коммерческое": PropertyType.COMMERCIAL,
    "commercial": PropertyType.COMMERCIAL,
    "земельный участок": PropertyType.LAND,
    "участок": PropertyType.LAND,
    "land": PropertyType.LAND,
    "таунхаус": PropertyType.TOWNHOUSE,
    "townhouse": PropertyType.TOWNHOUSE,
    "студия": PropertyType.STUDIO,
    "studio": PropertyType.STUDIO,
}


class PropertyStatus(Enum):
    """Listing status enumeration"""

    FOR_SALE = "for_sale"
    RESERVED = "reserved"
    SOLD = "sold"

    @property
    def display_name(self) -> str:
        return _PROPERTY_STATUS_NAMES[self]

    @classmethod
    def from_string(cls, value: str | None) -> PropertyStatus:
        """Parse a status code (``"for_sale"``) or its display name (``"в продаже"``).

        Raises:
            ValueError: If the status is unknown
        """
        normalized = (value or "").strip().lower()
        for status in cls:
            if normalized in (status.value, status.display_name):
                return status
        raise ValueError(f"Недопустимый статус недвижимости: {value}")

    def __str__(self) -> str:
        return self.display_name


_PROPERTY_STATUS_NAMES = {
    PropertyStatus.FOR_SALE: "в продаже",
    PropertyStatus.RESERVED: "забронирован",
    PropertyStatus.SOLD: "продан",
}
