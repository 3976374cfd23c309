"""Address value object."""

from __future__ import annotations

# Standard library imports
from typing import Any

from ..exceptions import ValidationError
from ..result import ERROR_SEPARATOR, Result
from .base import ValueObject
from .utils import is_blank, is_integer


class Address(ValueObject):
    """Immutable postal address of a property."""

    __slots__ = ("_street", "_city", "_house_number", "_zip_code", "_country")

    def __init__(
        self, street: str, city: str, house_number: int, zip_code: int, country: str
    ) -> None:
        errors = self.validate(street, city, house_number, zip_code, country)
        if errors:
            raise ValidationError(ERROR_SEPARATOR.join(errors), field="Address")
        self._street = street.strip()
        self._city = city.strip()
        self._house_number = house_number
        self._zip_code = zip_code
        self._country = country.strip()

    @staticmethod
    def validate(
        street: Any, city: Any, house_number: Any, zip_code: Any, country: Any
    ) -> list[str]:
        """Get every rule the address parts violate."""
        errors = []
        if not isinstance(street, str) or is_blank(street):
            errors.append("Улица не может быть пустой")
        if not isinstance(city, str) or is_blank(city):
            errors.append("Город не может быть пустым")
        if house_number is None:
            errors.append("Номер дома не может быть пустым")
        elif not is_integer(house_number) or house_number <= 0:
            errors.append("Номер дома должен быть положительным числом")
        if zip_code is None:
            errors.append("Почтовый индекс не может быть пустым")
        elif not is_integer(zip_code) or zip_code <= 0:
            errors.append("Почтовый индекс должен быть положительным числом")
        if not isinstance(country, str) or is_blank(country):
            errors.append("Страна не может быть пустой")
        return errors

    @classmethod
    def create(
        cls, street: str, city: str, house_number: int, zip_code: int, country: str
    ) -> Result[Address]:
        """Validate all address parts at once and build the Address."""
        return Result.from_errors(
            cls.validate(street, city, house_number, zip_code, country),
            lambda: cls(street, city, house_number, zip_code, country),
        )

    @property
    def street(self) -> str:
        return self._street

    @property
    def city(self) -> str:
        return self._city

    @property
    def house_number(self) -> int:
        return self._house_number

    @property
    def zip_code(self) -> int:
        return self._zip_code

    @property
    def country(self) -> str:
        return self._country

    def _components(self) -> tuple[Any, ...]:
        return (self._street, self._city, self._house_number, self._zip_code, self._country)

    def __str__(self) -> str:
        return (
            f"{self._street}, {self._city}, {self._house_number}, "
            f"{self._zip_code}, {self._country}"
        )
