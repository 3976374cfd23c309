"""
Client Entity - A buyer working with an agency
"""

from __future__ import annotations

# Standard library imports
from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..exceptions import require
from ..result import Result
from ..value_objects import (
    BookingId,
    ClientId,
    ClientSearchCriteria,
    CompletedDealId,
    ContactInfo,
    Name,
)


@dataclass(eq=False)
class Client:
    """
    Client entity.

    Bookings and completed deals are referenced by id only. Both id lists
    are free of duplicates and keep insertion order.
    """

    first_name: Name
    last_name: Name
    contact_info: ContactInfo
    search_criteria: ClientSearchCriteria | None = None

    # Identity
    id: ClientId = field(default_factory=ClientId.new)

    _completed_deal_ids: list[CompletedDealId] = field(default_factory=list, repr=False)
    _booking_ids: list[BookingId] = field(default_factory=list, repr=False)

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        first_name: Name | None,
        last_name: Name | None,
        contact_info: ContactInfo | None,
        search_criteria: ClientSearchCriteria | None = None,
    ) -> Result[Client]:
        """Factory method to create a client.

        Search criteria are optional.
        """
        errors = []
        if first_name is None:
            errors.append("Имя клиента не может быть пустым")
        if last_name is None:
            errors.append("Фамилия клиента не может быть пустой")
        if contact_info is None:
            errors.append("Контактная информация не может быть пустой")
        return Result.from_errors(
            errors,
            lambda: cls(
                first_name=first_name,  # type: ignore[arg-type]
                last_name=last_name,  # type: ignore[arg-type]
                contact_info=contact_info,  # type: ignore[arg-type]
                search_criteria=search_criteria,
            ),
        )

    @property
    def completed_deal_ids(self) -> tuple[CompletedDealId, ...]:
        return tuple(self._completed_deal_ids)

    @property
    def booking_ids(self) -> tuple[BookingId, ...]:
        return tuple(self._booking_ids)

    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def update_contact_info(self, contact_info: ContactInfo) -> None:
        require(contact_info, "contact_info")
        self.contact_info = contact_info
        self._touch()

    def update_search_criteria(self, search_criteria: ClientSearchCriteria | None) -> None:
        """Replace the search criteria; None clears them."""
        self.search_criteria = search_criteria
        self._touch()

    def add_completed_deal(self, completed_deal_id: CompletedDealId) -> None:
        require(completed_deal_id, "completed_deal_id")
        if completed_deal_id not in self._completed_deal_ids:
            self._completed_deal_ids.append(completed_deal_id)
            self._touch()

    def remove_completed_deal(self, completed_deal_id: CompletedDealId) -> bool:
        require(completed_deal_id, "completed_deal_id")
        if completed_deal_id not in self._completed_deal_ids:
            return False
        self._completed_deal_ids.remove(completed_deal_id)
        self._touch()
        return True

    def add_booking_id(self, booking_id: BookingId) -> None:
        require(booking_id, "booking_id")
        if booking_id not in self._booking_ids:
            self._booking_ids.append(booking_id)
            self._touch()

    def remove_booking_id(self, booking_id: BookingId) -> bool:
        require(booking_id, "booking_id")
        if booking_id not in self._booking_ids:
            return False
        self._booking_ids.remove(booking_id)
        self._touch()
        return True

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Client):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"Клиент {self.full_name()} ({self.contact_info})"
