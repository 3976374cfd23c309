"""
Booking Entity - A client's reservation of a property for a period
"""

from __future__ import annotations

# Standard library imports
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import ClassVar

from ..exceptions import InvalidStateTransitionError
from ..result import Result
from ..value_objects import AgencyId, BookingId, ClientId, Period, Price, PropertyId
from .agency import Agency
from .client import Client
from .property import Property


class BookingStatus(Enum):
    """Booking status enumeration"""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def display_name(self) -> str:
        return _BOOKING_STATUS_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_BOOKING_STATUS_NAMES = {
    BookingStatus.PENDING: "ожидает подтверждения",
    BookingStatus.CONFIRMED: "подтверждено",
    BookingStatus.COMPLETED: "завершено",
    BookingStatus.CANCELLED: "отменено",
}


@dataclass(eq=False)
class Booking:
    """
    Booking entity.

    References the client, property and agency by id only. The total price
    must match the property's price at the moment the booking is made.
    """

    client_id: ClientId
    property_id: PropertyId
    agency_id: AgencyId
    period: Period
    total_price: Price

    # Identity
    id: BookingId = field(default_factory=BookingId.new)

    status: BookingStatus = BookingStatus.PENDING

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    _TRANSITIONS: ClassVar[dict[BookingStatus, frozenset[BookingStatus]]] = {
        BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
        BookingStatus.CONFIRMED: frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED}),
        BookingStatus.COMPLETED: frozenset(),
        BookingStatus.CANCELLED: frozenset(),
    }

    @classmethod
    def create(
        cls,
        client: Client | None,
        property: Property | None,  # noqa: A002
        agency: Agency | None,
        period: Period | None,
        total_price: Price | None,
    ) -> Result[Booking]:
        """Factory method to create a pending booking.

        Args:
            client: Client making the booking
            property: Booked property
            agency: Agency handling the booking
            period: Booking period
            total_price: Agreed price, must equal the property's current price

        Returns:
            Result with the booking or every violated rule
        """
        errors = []
        if client is None:
            errors.append("Клиент не может быть пустым")
        if property is None:
            errors.append("Недвижимость не может быть пустой")
        if agency is None:
            errors.append("Агентство не может быть пустым")
        if period is None:
            errors.append("Период бронирования не может быть пустым")
        if total_price is None:
            errors.append("Общая стоимость не может быть пустой")

        if property is not None and total_price is not None:
            if total_price.value != property.price.value:
                errors.append(
                    f"Общая стоимость бронирования ({total_price}) не совпадает "
                    f"с ценой недвижимости ({property.price})"
                )

        return Result.from_errors(
            errors,
            lambda: cls(
                client_id=client.id,  # type: ignore[union-attr]
                property_id=property.id,  # type: ignore[union-attr]
                agency_id=agency.id,  # type: ignore[union-attr]
                period=period,  # type: ignore[arg-type]
                total_price=total_price,  # type: ignore[arg-type]
            ),
        )

    def confirm(self) -> None:
        """Confirm a pending booking"""
        self._transition_to(BookingStatus.CONFIRMED)

    def complete(self) -> None:
        """Complete a confirmed booking"""
        self._transition_to(BookingStatus.COMPLETED)

    def cancel(self) -> None:
        """Cancel a booking that is not yet finished"""
        self._transition_to(BookingStatus.CANCELLED)

    def can_transition_to(self, new_status: BookingStatus) -> bool:
        return new_status in self._TRANSITIONS[self.status]

    def is_active(self) -> bool:
        """Check if booking is in active state"""
        return self.status in [BookingStatus.PENDING, BookingStatus.CONFIRMED]

    def is_terminal(self) -> bool:
        """Check if booking is in terminal state"""
        return not self._TRANSITIONS[self.status]

    def _transition_to(self, new_status: BookingStatus) -> None:
        if not self.can_transition_to(new_status):
            raise InvalidStateTransitionError(
                entity_type="Booking",
                entity_id=self.id.value,
                current_state=self.status.display_name,
                attempted_state=new_status.display_name,
            )
        self.status = new_status
        self.updated_at = datetime.now(UTC)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Booking):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Бронирование {self.id}: недвижимость {self.property_id}, "
            f"{self.period}, стоимость: {self.total_price}, статус: {self.status.display_name}"
        )
