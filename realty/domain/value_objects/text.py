"""Free-text value objects: descriptions, license numbers and property features."""

# Standard library imports
from typing import Any, ClassVar

from ..constants import (
    DESCRIPTION_MAX_LENGTH,
    FREE_TEXT_MAX_LENGTH,
    LICENSE_NUMBER_MIN_LENGTH,
    NOT_SPECIFIED,
)
from .base import SingleValueObject
from .utils import is_blank


class Description(SingleValueObject):
    """Listing description, 1 to 1000 characters after trimming."""

    __slots__ = ()

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        if not isinstance(value, str) or is_blank(value):
            return ["Описание не может быть пустым"]
        if len(value.strip()) > DESCRIPTION_MAX_LENGTH:
            return [f"Описание не может превышать {DESCRIPTION_MAX_LENGTH} символов"]
        return []

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.strip()

    @property
    def value(self) -> str:
        return self._value

    def summary(self, max_length: int = 100) -> str:
        """Get the description shortened to ``max_length`` characters with an ellipsis."""
        if len(self._value) <= max_length:
            return self._value
        return self._value[: max_length - 1].rstrip() + "…"


class LicenseNumber(SingleValueObject):
    """Agency license number; compared case-insensitively."""

    __slots__ = ()

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        if not isinstance(value, str) or is_blank(value):
            return ["Номер лицензии не может быть пустым"]
        if len(value.strip()) < LICENSE_NUMBER_MIN_LENGTH:
            return [
                f"Номер лицензии должен содержать минимум {LICENSE_NUMBER_MIN_LENGTH} символов"
            ]
        return []

    @classmethod
    def _normalize(cls, value: str) -> str:
        return value.strip()

    @property
    def value(self) -> str:
        return self._value

    def _components(self) -> tuple[Any, ...]:
        return (self._value.lower(),)


class _OptionalFeature(SingleValueObject):
    """Short optional text where absence is recorded as ``NOT_SPECIFIED``.

    Values outside ``KNOWN_VALUES`` are accepted; ``is_known`` tells them apart.
    """

    __slots__ = ()

    KNOWN_VALUES: ClassVar[tuple[str, ...]] = ()
    _LABEL: ClassVar[str] = ""

    @classmethod
    def validate(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if not isinstance(value, str):
            return [f"{cls._LABEL} должно быть строкой"]
        if len(value.strip()) > FREE_TEXT_MAX_LENGTH:
            return [f"{cls._LABEL} не может превышать {FREE_TEXT_MAX_LENGTH} символов"]
        return []

    @classmethod
    def _normalize(cls, value: str | None) -> str:
        if is_blank(value):
            return NOT_SPECIFIED
        return value.strip()  # type: ignore[union-attr]

    @classmethod
    def not_specified(cls) -> "_OptionalFeature":
        """Get the placeholder instance used when nothing was entered."""
        return cls(None)

    @property
    def value(self) -> str:
        return self._value

    def is_specified(self) -> bool:
        """Check if a real value was entered."""
        return self._value.casefold() != NOT_SPECIFIED.casefold()

    def is_known(self) -> bool:
        """Check if the value is one of ``KNOWN_VALUES`` (case-insensitive)."""
        folded = self._value.casefold()
        return any(folded == known.casefold() for known in self.KNOWN_VALUES)

    def _components(self) -> tuple[Any, ...]:
        return (self._value.casefold(),)


class HeatingType(_OptionalFeature):
    """Heating system of the property."""

    __slots__ = ()

    KNOWN_VALUES = (
        "Центральное",
        "Газовое",
        "Электрическое",
        "Автономное",
        "Печное",
        NOT_SPECIFIED,
    )
    _LABEL = "Тип отопления"


class PropertyCondition(_OptionalFeature):
    """Finishing and repair state of the property."""

    __slots__ = ()

    KNOWN_VALUES = (
        "Новый",
        "Отличное",
        "Хорошее",
        "Удовлетворительное",
        "Требует ремонта",
        "Евроремонт",
        "Косметический ремонт",
        "Черновая отделка",
        "Под ремонт",
        NOT_SPECIFIED,
    )
    _LABEL = "Состояние недвижимости"
