"""Domain services for business logic that spans entities."""

from .deal_completion_service import DealCompletionService
from .ownership_transfer_service import OwnershipTransferService

__all__ = [
    "DealCompletionService",
    "OwnershipTransferService",
]
