"""Email value object."""

# Standard library imports
import re
from typing import Any, ClassVar

from .base import SingleValueObject
from .utils import is_blank


class Email(SingleValueObject):
    """Immutable value object representing an email address (case-insensitive)."""

    __slots__ = ()

    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$", re.IGNORECASE
    )

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        if not isinstance(value, str) or is_blank(value):
            return ["Email не может быть пустым"]
        if not cls._PATTERN.match(value.strip()):
            return ["Некорректный формат email"]
        return []

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.strip()

    @property
    def value(self) -> str:
        """Get the address as entered (trimmed)."""
        return self._value

    @property
    def domain(self) -> str:
        """Get the part after ``@`` in lower case."""
        return self._value.rsplit("@", 1)[1].lower()

    def _components(self) -> tuple[Any, ...]:
        return (self._value.lower(),)

    def __lt__(self, other: "Email") -> bool:
        if not isinstance(other, Email):
            raise TypeError(f"Cannot compare Email and {type(other).__name__}")
        return self._value.lower() < other._value.lower()
