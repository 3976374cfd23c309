"""
Agency Entity - A licensed real-estate agency and the properties it lists
"""

from __future__ import annotations

# Standard library imports
from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..exceptions import require
from ..result import Result
from ..value_objects import AgencyId, ContactInfo, LicenseNumber, Name, PropertyId
from .property import Property


@dataclass(eq=False)
class Agency:
    """
    Agency entity.

    Holds listed properties by reference; a property's lifetime is not bound
    to the agency.
    """

    name: Name
    contact_info: ContactInfo
    license_number: LicenseNumber

    # Identity
    id: AgencyId = field(default_factory=AgencyId.new)

    _properties: list[Property] = field(default_factory=list, repr=False)

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        name: Name | None,
        contact_info: ContactInfo | None,
        license_number: LicenseNumber | None,
    ) -> Result[Agency]:
        """Factory method to create an agency with no listings."""
        errors = []
        if name is None:
            errors.append("Название агентства не может быть пустым")
        if contact_info is None:
            errors.append("Контактная информация не может быть пустой")
        if license_number is None:
            errors.append("Номер лицензии не может быть пустым")
        return Result.from_errors(
            errors,
            lambda: cls(name=name, contact_info=contact_info, license_number=license_number),  # type: ignore[arg-type]
        )

    @property
    def properties(self) -> tuple[Property, ...]:
        """Get a read-only snapshot of the listed properties"""
        return tuple(self._properties)

    def add_property(self, prop: Property) -> None:
        """List a property. Adding an already listed property does nothing."""
        require(prop, "property")
        if prop in self._properties:
            return
        self._properties.append(prop)
        self._touch()

    def remove_property(self, prop: Property) -> bool:
        """Remove a listed property.

        Returns:
            True if the property was listed and has been removed
        """
        require(prop, "property")
        if prop not in self._properties:
            return False
        self._properties.remove(prop)
        self._touch()
        return True

    def find_property(self, property_id: PropertyId) -> Property | None:
        """Get a listed property by id"""
        for prop in self._properties:
            if prop.id == property_id:
                return prop
        return None

    def update_contact_info(self, contact_info: ContactInfo) -> None:
        require(contact_info, "contact_info")
        self.contact_info = contact_info
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Agency):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Агентство {self.name} (лицензия {self.license_number}), "
            f"{self.contact_info}, объектов: {len(self._properties)}"
        )
