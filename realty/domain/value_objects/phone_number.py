"""Phone number value object (Russian numbering plan)."""

# Standard library imports
import re
from typing import Any, ClassVar

from .base import SingleValueObject
from .utils import is_blank


class PhoneNumber(SingleValueObject):
    """Immutable value object representing a Russian phone number.

    Input such as ``8 (912) 345-67-89``, ``9123456789`` or ``+7 912 345 67 89`` is
    normalized to ``+79123456789``. Only numbers that end up in the ``+7`` plus
    ten digits form are accepted.
    """

    __slots__ = ()

    _NORMALIZED: ClassVar[re.Pattern[str]] = re.compile(r"^\+7\d{10}$")
    _NON_DIGITS: ClassVar[re.Pattern[str]] = re.compile(r"\D")

    @classmethod
    def normalize(cls, raw: str) -> str:
        """Reduce ``raw`` to digits with an optional leading ``+`` and add the country code.

        Args:
            raw: Phone number in any common notation

        Returns:
            Normalized candidate string (not yet validated)
        """
        stripped = raw.strip()
        has_plus = stripped.startswith("+")
        digits = cls._NON_DIGITS.sub("", stripped)

        if has_plus:
            return "+" + digits
        if digits.startswith("8"):
            return "+7" + digits[1:]
        if len(digits) == 10:
            return "+7" + digits
        if len(digits) == 11 and digits.startswith("7"):
            return "+" + digits
        return "+" + digits

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        if not isinstance(value, str) or is_blank(value):
            return ["Номер телефона не может быть пустым"]
        if not cls._NORMALIZED.match(cls.normalize(value)):
            return ["Некорректный формат российского номера телефона"]
        return []

    @classmethod
    def _normalize(cls, value: str) -> str:
        return cls.normalize(value)

    @property
    def value(self) -> str:
        """Get the normalized ``+7XXXXXXXXXX`` form."""
        return self._value

    def formatted(self) -> str:
        """Get the number as ``+7 (XXX) XXX-XX-XX``."""
        digits = self._value[2:]
        return f"+7 ({digits[:3]}) {digits[3:6]}-{digits[6:8]}-{digits[8:]}"

    def _components(self) -> tuple[Any, ...]:
        return (self._value.lower(),)
