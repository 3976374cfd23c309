"""Immutable value objects for type safety."""

from .address import Address
from .contact_info import ContactInfo
from .deal_details import DealDetails, Document
from .email import Email
from .enums import PropertyStatus, PropertyType
from .identifiers import (
    AgencyId,
    BookingId,
    ClientId,
    CompletedDealId,
    DealId,
    PropertyId,
    TypedId,
)
from .measurements import Area, Floor, NumberOfRooms, TotalFloors
from .name import Name
from .period import Period
from .phone_number import PhoneNumber
from .price import Price
from .property_details import PropertyDetails
from .search_criteria import ClientSearchCriteria
from .text import Description, HeatingType, LicenseNumber, PropertyCondition

__all__ = [
    "Address",
    "AgencyId",
    "Area",
    "BookingId",
    "ClientId",
    "ClientSearchCriteria",
    "CompletedDealId",
    "ContactInfo",
    "DealDetails",
    "DealId",
    "Description",
    "Document",
    "Email",
    "Floor",
    "HeatingType",
    "LicenseNumber",
    "Name",
    "NumberOfRooms",
    "Period",
    "PhoneNumber",
    "Price",
    "PropertyCondition",
    "PropertyDetails",
    "PropertyId",
    "PropertyStatus",
    "PropertyType",
    "TotalFloors",
    "TypedId",
]
