"""
Deal Entities - An in-progress sale and the record of a finished one
"""

from __future__ import annotations

# Standard library imports
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import Enum
from uuid import UUID

from ..constants import DATE_FORMAT
from ..exceptions import require
from ..result import Result
from ..value_objects import (
    BookingId,
    ClientId,
    CompletedDealId,
    DealDetails,
    DealId,
    Document,
    Price,
    PropertyId,
)
from ..value_objects.deal_details import validate_deal_terms
from ..value_objects.utils import to_date


class DealStatus(Enum):
    """Deal status enumeration"""

    CREATED = "created"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def display_name(self) -> str:
        return _DEAL_STATUS_NAMES[self]

    @classmethod
    def from_code(cls, code: str | None) -> DealStatus | None:
        """Get a status by its case-insensitive code, or None if unknown"""
        normalized = (code or "").strip().lower()
        for status in cls:
            if status.value == normalized:
                return status
        return None

    def __str__(self) -> str:
        return self.display_name


_DEAL_STATUS_NAMES = {
    DealStatus.CREATED: "Создана",
    DealStatus.CONFIRMED: "Подтверждена",
    DealStatus.COMPLETED: "Завершена",
    DealStatus.CANCELLED: "Отменена",
}


@dataclass(eq=False)
class Deal:
    """
    Deal entity.

    Tracks a sale from creation to completion. Status changes are not guarded;
    callers decide when a deal may move on.
    """

    client_id: ClientId
    property_id: PropertyId
    details: DealDetails
    booking_id: BookingId | None = None

    # Identity
    id: DealId = field(default_factory=DealId.new)

    status: DealStatus = DealStatus.CREATED
    _documents: list[Document] = field(default_factory=list, repr=False)

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        client_id: ClientId | None,
        property_id: PropertyId | None,
        booking_id: BookingId | None,
        details: DealDetails | None,
    ) -> Result[Deal]:
        """Factory method to create a deal.

        The booking is optional; a property can be sold without one.
        """
        errors = []
        if client_id is None:
            errors.append("ID клиента не может быть пустым")
        if property_id is None:
            errors.append("ID недвижимости не может быть пустым")
        if details is None:
            errors.append("Детали сделки не могут быть пустыми")
        return Result.from_errors(
            errors,
            lambda: cls(
                client_id=client_id,  # type: ignore[arg-type]
                property_id=property_id,  # type: ignore[arg-type]
                details=details,  # type: ignore[arg-type]
                booking_id=booking_id,
            ),
        )

    @property
    def documents(self) -> tuple[Document, ...]:
        return tuple(self._documents)

    def confirm(self) -> None:
        self._set_status(DealStatus.CONFIRMED)

    def complete(self) -> None:
        self._set_status(DealStatus.COMPLETED)

    def cancel(self) -> None:
        self._set_status(DealStatus.CANCELLED)

    def add_document(self, document: Document) -> None:
        """Attach a document. Attaching the same document twice does nothing."""
        require(document, "document")
        if document in self._documents:
            return
        self._documents.append(document)
        self._touch()

    def remove_document(self, document_id: UUID) -> bool:
        """Detach a document by id.

        Returns:
            True if a document was removed
        """
        require(document_id, "document_id")
        for document in self._documents:
            if document.id == document_id:
                self._documents.remove(document)
                self._touch()
                return True
        return False

    def is_completed(self) -> bool:
        return self.status == DealStatus.COMPLETED

    def _set_status(self, status: DealStatus) -> None:
        self.status = status
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deal):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"Сделка {self.id}: {self.details}, статус: {self.status.display_name}"


@dataclass(eq=False, frozen=True)
class CompletedDeal:
    """
    Completed deal record.

    Frozen once created; kept on the client as a reference by id.
    """

    client_id: ClientId
    property_id: PropertyId
    deal_date: date
    deal_amount: Price
    deal_type: str

    # Identity
    id: CompletedDealId = field(default_factory=CompletedDealId.new)

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(
        cls,
        client_id: ClientId | None,
        property_id: PropertyId | None,
        deal_date: date | None,
        deal_amount: Price | None,
        deal_type: str | None,
    ) -> Result[CompletedDeal]:
        """Factory method to record a finished sale.

        Args:
            client_id: Buyer
            property_id: Sold property
            deal_date: Day of the sale, not in the future
            deal_amount: Final amount
            deal_type: Kind of deal, e.g. "Покупка"

        Returns:
            Result with the record or every violated rule
        """
        errors = []
        if client_id is None:
            errors.append("ID клиента не может быть пустым")
        if property_id is None:
            errors.append("ID недвижимости не может быть пустым")
        errors.extend(validate_deal_terms(deal_date, deal_amount, deal_type))
        return Result.from_errors(
            errors,
            lambda: cls(
                client_id=client_id,  # type: ignore[arg-type]
                property_id=property_id,  # type: ignore[arg-type]
                deal_date=to_date(deal_date),  # type: ignore[arg-type]
                deal_amount=deal_amount,  # type: ignore[arg-type]
                deal_type=deal_type.strip(),  # type: ignore[union-attr]
            ),
        )

    @classmethod
    def from_deal(cls, deal: Deal) -> Result[CompletedDeal]:
        """Build the record of a deal that has been completed.

        Raises:
            RequiredArgumentError: If deal is None
        """
        require(deal, "deal")
        if not deal.is_completed():
            return Result.failure(
                f"Сделка в статусе '{deal.status.display_name}' ещё не завершена"
            )
        return cls.create(
            deal.client_id,
            deal.property_id,
            deal.details.deal_date,
            deal.details.deal_amount,
            deal.details.deal_type,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompletedDeal):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Завершённая сделка {self.id}: {self.deal_type} от "
            f"{self.deal_date.strftime(DATE_FORMAT)}, сумма: {self.deal_amount}"
        )
