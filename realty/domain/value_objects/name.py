"""Name value object for people and organisations."""

# Standard library imports
import re
from typing import Any, ClassVar

from ..constants import NAME_MAX_LENGTH, NAME_MIN_LENGTH
from .base import SingleValueObject
from .utils import is_blank


class Name(SingleValueObject):
    """Immutable value object representing a person's or an agency's name.

    Latin and Cyrillic letters, whitespace, hyphens and dots are allowed.
    Comparison ignores case.
    """

    __slots__ = ()

    _ALLOWED: ClassVar[re.Pattern[str]] = re.compile(r"^[a-zA-Zа-яА-ЯёЁ\s\-.]+$")
    _LETTER: ClassVar[re.Pattern[str]] = re.compile(r"[a-zA-Zа-яА-ЯёЁ]")

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        if not isinstance(value, str) or is_blank(value):
            return ["Имя не может быть пустым"]

        trimmed = value.strip()
        errors = []
        if len(trimmed) < NAME_MIN_LENGTH:
            errors.append(f"Имя должно содержать минимум {NAME_MIN_LENGTH} символа")
        if len(trimmed) > NAME_MAX_LENGTH:
            errors.append(f"Имя не может превышать {NAME_MAX_LENGTH} символов")
        if not cls._ALLOWED.match(trimmed):
            errors.append("Имя может содержать только буквы, пробелы, дефисы и точки")
        if not cls._LETTER.search(trimmed):
            errors.append("Имя должно содержать хотя бы одну букву")
        return errors

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.strip()

    @property
    def value(self) -> str:
        """Get the trimmed name."""
        return self._value

    def initials(self) -> str:
        """Get upper-cased first letters of each word, dot separated (``"I.I.I"``)."""
        letters = [word[0].upper() for word in self._value.split() if word[0].isalpha()]
        return ".".join(letters)

    def last_name(self) -> str:
        """Get the first word, which holds the surname in "Surname Name" order."""
        words = self._value.split()
        return words[0] if words else ""

    def _components(self) -> tuple[Any, ...]:
        return (self._value.casefold(),)

    def __lt__(self, other: "Name") -> bool:
        if not isinstance(other, Name):
            raise TypeError(f"Cannot compare Name and {type(other).__name__}")
        return self._value.casefold() < other._value.casefold()

    def __repr__(self) -> str:
        return f"Name('{self._value}')"
