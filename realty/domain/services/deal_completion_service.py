"""
Deal Completion Service - Domain service for closing a sale.

Completing a deal changes three aggregates at once: the deal is marked
completed, the property is marked sold and the client receives a reference to
the completed-deal record.
"""

import logging

from ..entities.client import Client
from ..entities.deal import CompletedDeal, Deal, DealStatus
from ..entities.property import Property
from ..exceptions import require
from ..result import Result
from ..value_objects import PropertyStatus

logger = logging.getLogger(__name__)


class DealCompletionService:
    """Finalizes deals and propagates the outcome to the property and client."""

    def complete(self, deal: Deal, prop: Property, client: Client) -> Result[CompletedDeal]:
        """Complete ``deal`` and record the sale.

        Args:
            deal: Deal being closed
            prop: Property the deal refers to
            client: Buyer the deal refers to

        Returns:
            Result with the completed-deal record, or a failure when the deal
            does not belong to the given property and client, was cancelled or
            already completed, or its terms no longer validate. Nothing is changed on failure.

        Raises:
            RequiredArgumentError: If any argument is None
        """
        require(deal, "deal")
        require(prop, "property")
        require(client, "client")

        errors = []
        if deal.property_id != prop.id:
            errors.append("Сделка относится к другой недвижимости")
        if deal.client_id != client.id:
            errors.append("Сделка относится к другому клиенту")
        if deal.status == DealStatus.CANCELLED:
            errors.append("Отменённую сделку нельзя завершить")
        if deal.status == DealStatus.COMPLETED:
            errors.append("Сделка уже завершена")
        if errors:
            logger.warning(
                "Rejected deal completion",
                extra={"deal_id": str(deal.id), "errors": "; ".join(errors)},
            )
            return Result.failure(errors)

        details = deal.details
        completed_result = CompletedDeal.create(
            deal.client_id,
            deal.property_id,
            details.deal_date,
            details.deal_amount,
            details.deal_type,
        )
        if completed_result.is_failure:
            logger.warning(
                "Rejected deal completion",
                extra={"deal_id": str(deal.id), "errors": completed_result.error},
            )
            return completed_result

        completed = completed_result.value
        deal.complete()
        prop.change_status(PropertyStatus.SOLD)
        client.add_completed_deal(completed.id)

        logger.info(
            "Completed deal",
            extra={
                "deal_id": str(deal.id),
                "completed_deal_id": str(completed.id),
                "property_id": str(prop.id),
                "client_id": str(client.id),
                "amount": float(details.deal_amount.value),
            },
        )
        return completed_result
