"""Global pytest configuration and fixtures."""

# Standard library imports
from datetime import date
from pathlib import Path

# Load test environment variables
from dotenv import load_dotenv

test_env_path = Path(__file__).parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)

# Third-party imports
import pytest

# Local imports
from realty.domain.entities import Agency, Client, OwnershipRecord, Property
from realty.domain.value_objects import (
    Address,
    ContactInfo,
    Description,
    LicenseNumber,
    Name,
    Price,
    PropertyDetails,
    PropertyType,
)
from realty.infrastructure import reset_config


@pytest.fixture
def address() -> Address:
    return Address("Ленина", "Москва", 10, 129903, "Россия")


@pytest.fixture
def price() -> Price:
    return Price(5_000_000)


@pytest.fixture
def description() -> Description:
    return Description("Светлая квартира в центре города")


@pytest.fixture
def details() -> PropertyDetails:
    return PropertyDetails.from_primitives(
        area=85,
        number_of_rooms=3,
        floor=5,
        total_floors=9,
        property_type=PropertyType.APARTMENT,
        has_balcony=True,
        heating_type="Центральное",
        condition="Хорошее",
    ).value


@pytest.fixture
def first_owner() -> OwnershipRecord:
    return OwnershipRecord.create("Иванов И.И.", date(2015, 3, 1), "Покупка").value


@pytest.fixture
def listed_property(address, price, description, details, first_owner) -> Property:
    """A property freshly listed for sale."""
    return Property.create(address, price, description, details, first_owner).value


@pytest.fixture
def contact_info() -> ContactInfo:
    return ContactInfo.from_strings("client@example.com", "+7 912 345 67 89").value


@pytest.fixture
def client(contact_info) -> Client:
    return Client.create(Name("Пётр"), Name("Петров"), contact_info).value


@pytest.fixture
def agency() -> Agency:
    contact = ContactInfo.from_strings("office@realty.ru", "8 (495) 123-45-67").value
    return Agency.create(Name("Домострой"), contact, LicenseNumber("LIC-77-001")).value


@pytest.fixture(autouse=True)
def reset_global_config():
    """Drop cached configuration between tests."""
    reset_config()
    yield
    reset_config()
