"""Domain entities with identity and lifecycle."""

from .agency import Agency
from .booking import Booking, BookingStatus
from .client import Client
from .deal import CompletedDeal, Deal, DealStatus
from .ownership import OwnershipHistory, OwnershipRecord
from .property import Property

__all__ = [
    "Agency",
    "Booking",
    "BookingStatus",
    "Client",
    "CompletedDeal",
    "Deal",
    "DealStatus",
    "OwnershipHistory",
    "OwnershipRecord",
    "Property",
]
