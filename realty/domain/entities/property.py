"""
Property Entity - Aggregate root for a listed piece of real estate
"""

from __future__ import annotations

# Standard library imports
from dataclasses import InitVar, dataclass, field
from datetime import UTC, datetime

from ..exceptions import require
from ..result import Result
from ..value_objects import (
    Address,
    Description,
    Price,
    PropertyDetails,
    PropertyId,
    PropertyStatus,
)
from .ownership import OwnershipHistory, OwnershipRecord


@dataclass(eq=False)
class Property:
    """
    Property aggregate root.

    Owns its address, price, description, physical details and ownership
    history. The history is seeded with the first owner on construction and
    records can only be added, so it is never empty. Status is a plain field;
    any status may be set.
    """

    address: Address
    price: Price
    description: Description
    details: PropertyDetails
    first_owner: InitVar[OwnershipRecord]

    # Identity
    id: PropertyId = field(default_factory=PropertyId.new)

    status: PropertyStatus = PropertyStatus.FOR_SALE
    _ownership_history: OwnershipHistory = field(
        default_factory=OwnershipHistory, init=False, repr=False
    )

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    def __post_init__(self, first_owner: OwnershipRecord) -> None:
        require(first_owner, "first_owner")
        self._ownership_history.add_record(first_owner)

    @classmethod
    def create(
        cls,
        address: Address | None,
        price: Price | None,
        description: Description | None,
        details: PropertyDetails | None,
        first_owner: OwnershipRecord | None,
    ) -> Result[Property]:
        """Factory method to create a property listed for sale.

        Nested value objects are expected to be validated by their own
        factories; only their presence is checked here.

        Args:
            address: Property address
            price: Asking price
            description: Listing text
            details: Physical characteristics
            first_owner: Initial ownership record

        Returns:
            Result with the property or one error per missing argument
        """
        errors = []
        if address is None:
            errors.append("Адрес не может быть пустым")
        if price is None:
            errors.append("Цена не может быть пустой")
        if description is None:
            errors.append("Описание не может быть пустым")
        if details is None:
            errors.append("Характеристики недвижимости не могут быть пустыми")
        if first_owner is None:
            errors.append("Первый владелец не может быть пустым")
        if errors:
            return Result.failure(errors)

        prop = cls(
            address=address,  # type: ignore[arg-type]
            price=price,  # type: ignore[arg-type]
            description=description,  # type: ignore[arg-type]
            details=details,  # type: ignore[arg-type]
            first_owner=first_owner,  # type: ignore[arg-type]
        )
        return Result.success(prop)

    def update_price(self, new_price: Price) -> None:
        """Set a new asking price"""
        require(new_price, "new_price")
        self.price = new_price
        self._touch()

    def update_description(self, new_description: Description) -> None:
        """Replace the listing text"""
        require(new_description, "new_description")
        self.description = new_description
        self._touch()

    def add_ownership_record(self, record: OwnershipRecord) -> None:
        """Append an ownership record to the history"""
        require(record, "record")
        self._ownership_history.add_record(record)
        self._touch()

    def change_status(self, new_status: PropertyStatus) -> None:
        """Set the listing status without transition checks"""
        require(new_status, "new_status")
        self.status = new_status
        self._touch()

    @property
    def ownership_records(self) -> tuple[OwnershipRecord, ...]:
        """Get the ownership history, oldest first"""
        return self._ownership_history.records

    def ownership_count(self) -> int:
        return len(self._ownership_history)

    def get_current_owner(self) -> OwnershipRecord | None:
        """Get the owner with the latest start date"""
        return self._ownership_history.get_current_owner()

    def is_available(self) -> bool:
        """Check if the property can still be booked or bought"""
        return self.status == PropertyStatus.FOR_SALE

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Property):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        """String representation"""
        return (
            f"Недвижимость {self.id}: {self.address}, цена: {self.price}, "
            f"статус: {self.status.display_name}, площадь: {self.details.area}, "
            f"комнат: {self.details.number_of_rooms.value}, "
            f"этаж: {self.details.floor.value}/{self.details.total_floors.value}"
        )
