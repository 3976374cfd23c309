"""
Unit tests for the Property aggregate.
"""

# Standard library imports
from datetime import date, timedelta

# Third-party imports
import pytest

# Local imports
from realty.domain.entities import OwnershipRecord, Property
from realty.domain.exceptions import RequiredArgumentError
from realty.domain.value_objects import (
    Address,
    Description,
    Price,
    PropertyDetails,
    PropertyStatus,
    PropertyType,
)


class TestPropertyCreation:
    """Test Property.create"""

    def test_end_to_end_listing(self):
        address = Address.create("Lenina 10", "Moscow", 10, 129903, "Russia").value
        price = Price.create(5_000_000).value
        description = Description.create("Просторная квартира с ремонтом").value
        details = PropertyDetails.from_primitives(
            85, 3, 5, 9, PropertyType.APARTMENT, has_balcony=True
        ).value
        owner = OwnershipRecord.create("Ivanov I.I.", date.today(), "Purchase").value

        result = Property.create(address, price, description, details, owner)

        assert result.is_success
        prop = result.value
        assert prop.get_current_owner().owner_name.value == "Ivanov I.I."
        assert prop.status == PropertyStatus.FOR_SALE
        assert prop.updated_at is None

        successor = OwnershipRecord.create(
            "Petrov P.P.", date.today() + timedelta(days=1), "Purchase"
        ).value
        prop.add_ownership_record(successor)

        assert prop.get_current_owner().owner_name.value == "Petrov P.P."
        assert prop.ownership_count() == 2

    def test_missing_arguments_all_reported(self):
        result = Property.create(None, None, None, None, None)
        assert len(result.errors) == 5

    def test_history_never_empty_after_create(self, listed_property):
        assert listed_property.ownership_count() == 1

    def test_direct_construction_seeds_history(
        self, address, price, description, details, first_owner
    ):
        prop = Property(address, price, description, details, first_owner)

        assert prop.get_current_owner() is first_owner
        assert prop.ownership_records == (first_owner,)

    def test_direct_construction_requires_first_owner(self, address, price, description, details):
        with pytest.raises(RequiredArgumentError):
            Property(address, price, description, details, None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Property(address, price, description, details)  # type: ignore[call-arg]

    def test_history_cannot_be_emptied_from_outside(self, listed_property, first_owner):
        records = listed_property.ownership_records

        assert isinstance(records, tuple)
        assert not hasattr(listed_property, "ownership_history")
        assert not hasattr(listed_property, "remove_ownership_record")
        assert listed_property.get_current_owner() is first_owner

    def test_ids_unique(self, address, price, description, details, first_owner):
        first = Property.create(address, price, description, details, first_owner).value
        second = Property.create(address, price, description, details, first_owner).value
        assert first != second
        assert first.id != second.id


class TestPropertyMutation:
    """Test mutators and timestamps."""

    def test_update_price_stamps_updated_at(self, listed_property):
        listed_property.update_price(Price(4_500_000))

        assert listed_property.price == Price(4_500_000)
        assert listed_property.updated_at is not None

    def test_update_description(self, listed_property):
        listed_property.update_description(Description("Новое описание"))
        assert listed_property.description.value == "Новое описание"

    def test_change_status_is_unguarded(self, listed_property):
        listed_property.change_status(PropertyStatus.SOLD)
        listed_property.change_status(PropertyStatus.FOR_SALE)

        assert listed_property.is_available()

    def test_reserved_is_not_available(self, listed_property):
        listed_property.change_status(PropertyStatus.RESERVED)
        assert not listed_property.is_available()

    @pytest.mark.parametrize(
        "method", ["update_price", "update_description", "add_ownership_record", "change_status"]
    )
    def test_none_raises_required_argument(self, listed_property, method):
        with pytest.raises(RequiredArgumentError):
            getattr(listed_property, method)(None)
        assert listed_property.updated_at is None

    def test_summary_line(self, listed_property):
        text = str(listed_property)

        assert str(listed_property.id) in text
        assert "Ленина, Москва, 10, 129903, Россия" in text
        assert "5 000 000,00 ₽" in text
        assert "в продаже" in text
        assert "85 м²" in text
        assert "этаж: 5/9" in text
