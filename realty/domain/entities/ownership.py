"""
Ownership History - who owned a property and when.

The history is kept sorted by start date. The current owner is the record with
the latest start date; an end date on that record does not demote it.
"""

from __future__ import annotations

# Standard library imports
from collections.abc import Iterator
from datetime import date

from ..constants import DATE_FORMAT
from ..exceptions import ValidationError, require
from ..result import Result
from ..value_objects import Name
from ..value_objects.utils import is_blank, is_empty_date


class OwnershipRecord:
    """A single ownership period of a property.

    Attributes are read-only; the only change allowed after creation is closing
    the period with ``set_end_date``.
    """

    __slots__ = ("_owner_name", "_start_date", "_end_date", "_ownership_reason")

    def __init__(
        self,
        owner_name: Name,
        start_date: date,
        ownership_reason: str,
        end_date: date | None = None,
    ) -> None:
        self._owner_name = owner_name
        self._start_date = start_date
        self._ownership_reason = ownership_reason.strip()
        self._end_date = end_date

    @classmethod
    def create(
        cls,
        owner_name: str | None,
        start_date: date | None,
        ownership_reason: str | None,
        end_date: date | None = None,
    ) -> Result[OwnershipRecord]:
        """Validate the raw inputs and build a record.

        Args:
            owner_name: Owner full name, validated as ``Name``
            start_date: First day of ownership
            ownership_reason: Legal basis, e.g. "Покупка" or "Наследство"
            end_date: Last day of ownership (optional)

        Returns:
            Result with the record or every violated rule
        """
        name_result = Name.create(owner_name)
        errors = list(name_result.errors)
        if is_empty_date(start_date):
            errors.append("Дата начала владения не может быть пустой")
        if is_blank(ownership_reason):
            errors.append("Основание владения не может быть пустым")
        if end_date is not None and not is_empty_date(start_date) and end_date < start_date:  # type: ignore[operator]
            errors.append("Дата окончания владения не может быть раньше даты начала")

        return Result.from_errors(
            errors,
            lambda: cls(name_result.value, start_date, ownership_reason, end_date),  # type: ignore[arg-type]
        )

    @property
    def owner_name(self) -> Name:
        return self._owner_name

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def end_date(self) -> date | None:
        return self._end_date

    @property
    def ownership_reason(self) -> str:
        return self._ownership_reason

    def set_end_date(self, end_date: date) -> None:
        """Close the ownership period.

        Raises:
            RequiredArgumentError: If end_date is None
            ValidationError: If end_date precedes the start date
        """
        require(end_date, "end_date")
        if end_date < self._start_date:
            raise ValidationError(
                "Дата окончания владения не может быть раньше даты начала",
                field="end_date",
                value=end_date,
            )
        self._end_date = end_date

    def is_current_owner(self) -> bool:
        """Check if the ownership period is still open"""
        return self._end_date is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OwnershipRecord):
            return False
        return (
            self._owner_name == other._owner_name
            and self._start_date == other._start_date
            and self._ownership_reason == other._ownership_reason
            and self._end_date == other._end_date
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"OwnershipRecord(owner_name={self._owner_name.value!r}, "
            f"start_date={self._start_date!r}, end_date={self._end_date!r}, "
            f"ownership_reason={self._ownership_reason!r})"
        )

    def __str__(self) -> str:
        period = f"с {self._start_date.strftime(DATE_FORMAT)}"
        if self._end_date is not None:
            period += f" по {self._end_date.strftime(DATE_FORMAT)}"
        return f"{self._owner_name} ({self._ownership_reason}, {period})"


class OwnershipHistory:
    """Ordered sequence of ownership records, sorted ascending by start date."""

    def __init__(self) -> None:
        self._records: list[OwnershipRecord] = []

    @property
    def records(self) -> tuple[OwnershipRecord, ...]:
        """Get a read-only snapshot of the records"""
        return tuple(self._records)

    def add_record(self, record: OwnershipRecord) -> None:
        """Insert a record, keeping the sequence sorted by start date.

        Records with equal start dates keep their insertion order.

        Raises:
            RequiredArgumentError: If record is None
        """
        require(record, "record")
        self._records.append(record)
        self._records.sort(key=lambda item: item.start_date)

    def remove_record(self, record: OwnershipRecord) -> bool:
        """Remove the first record equal to ``record``.

        Returns:
            True if a record was removed

        Raises:
            RequiredArgumentError: If record is None
        """
        require(record, "record")
        try:
            self._records.remove(record)
        except ValueError:
            return False
        return True

    def get_current_owner(self) -> OwnershipRecord | None:
        """Get the record with the latest start date.

        On equal start dates the most recently added record wins; since the
        sort is stable that is the last one in the sequence.
        """
        if not self._records:
            return None
        return self._records[-1]

    def is_empty(self) -> bool:
        return not self._records

    def __iter__(self) -> Iterator[OwnershipRecord]:
        return iter(tuple(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"OwnershipHistory({len(self._records)} records)"
