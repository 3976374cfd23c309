"""Deal terms and attached documents."""

from __future__ import annotations

# Standard library imports
from datetime import UTC, date, datetime
from typing import Any
from uuid import UUID, uuid4

from ..constants import DATE_FORMAT
from ..exceptions import ValidationError
from ..result import ERROR_SEPARATOR, Result
from .base import ValueObject
from .price import Price
from .utils import is_blank, is_empty_date, to_date


def validate_deal_terms(
    deal_date: date | None, deal_amount: Price | None, deal_type: str | None
) -> list[str]:
    """Get violations of the rules shared by deal details and completed deals.

    A datetime is accepted and compared by its calendar day.
    """
    errors = []
    if deal_amount is None:
        errors.append("Сумма сделки не может быть пустой")
    if deal_type is not None and not isinstance(deal_type, str):
        errors.append("Тип сделки должен быть строкой")
    elif is_blank(deal_type):
        errors.append("Тип сделки не может быть пустым")
    if is_empty_date(deal_date):
        errors.append("Дата сделки не может быть пустой")
    elif not isinstance(deal_date, date):
        errors.append("Дата сделки должна быть датой")
    elif to_date(deal_date) > date.today():
        errors.append("Дата сделки не может быть в будущем")
    return errors


class DealDetails(ValueObject):
    """Date, amount, type and optional comments of a deal."""

    __slots__ = ("_deal_date", "_deal_amount", "_deal_type", "_comments")

    def __init__(
        self, deal_date: date, deal_amount: Price, deal_type: str, comments: str | None = None
    ) -> None:
        errors = validate_deal_terms(deal_date, deal_amount, deal_type)
        if errors:
            raise ValidationError(ERROR_SEPARATOR.join(errors), field="DealDetails")
        self._deal_date = to_date(deal_date)
        self._deal_amount = deal_amount
        self._deal_type = deal_type.strip()
        self._comments = comments.strip() if comments else None

    @classmethod
    def create(
        cls,
        deal_date: date | None,
        deal_amount: Price | None,
        deal_type: str | None,
        comments: str | None = None,
    ) -> Result[DealDetails]:
        return Result.from_errors(
            validate_deal_terms(deal_date, deal_amount, deal_type),
            lambda: cls(deal_date, deal_amount, deal_type, comments),  # type: ignore[arg-type]
        )

    @property
    def deal_date(self) -> date:
        return self._deal_date

    @property
    def deal_amount(self) -> Price:
        return self._deal_amount

    @property
    def deal_type(self) -> str:
        return self._deal_type

    @property
    def comments(self) -> str | None:
        return self._comments

    def _components(self) -> tuple[Any, ...]:
        return (self._deal_date, self._deal_amount, self._deal_type, self._comments or "")

    def __str__(self) -> str:
        return (
            f"Сделка от {self._deal_date.strftime(DATE_FORMAT)}: "
            f"{self._deal_amount} ({self._deal_type})"
        )


class Document(ValueObject):
    """A file attached to a deal. Every document has its own id."""

    __slots__ = ("_id", "_title", "_document_type", "_file_path", "_created_at")

    def __init__(self, title: str, document_type: str, file_path: str) -> None:
        errors = self.validate(title, document_type, file_path)
        if errors:
            raise ValidationError(ERROR_SEPARATOR.join(errors), field="Document")
        self._id = uuid4()
        self._title = title.strip()
        self._document_type = document_type.strip()
        self._file_path = file_path.strip()
        self._created_at = datetime.now(UTC)

    @staticmethod
    def validate(title: Any, document_type: Any, file_path: Any) -> list[str]:
        errors = []
        if is_blank(title):
            errors.append("Название документа не может быть пустым")
        if is_blank(document_type):
            errors.append("Тип документа не может быть пустым")
        if is_blank(file_path):
            errors.append("Путь к файлу документа не может быть пустым")
        return errors

    @classmethod
    def create(cls, title: str, document_type: str, file_path: str) -> Result[Document]:
        return Result.from_errors(
            cls.validate(title, document_type, file_path),
            lambda: cls(title, document_type, file_path),
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def document_type(self) -> str:
        return self._document_type

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def _components(self) -> tuple[Any, ...]:
        return (self._id,)

    def __str__(self) -> str:
        return f"{self._title} ({self._document_type}) - {self._file_path}"
