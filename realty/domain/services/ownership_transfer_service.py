"""
Ownership Transfer Service - Domain service for handing a property to a new owner.

Closing the outgoing owner's period and opening the incoming one touch both
the ownership history and the property, so the sequence lives here rather than
on either entity.

Example:
    >>> from datetime import date
    >>> service = OwnershipTransferService()
    >>> result = service.transfer(prop, "Петров П.П.", date(2024, 5, 1), "Покупка")
    >>> result.value.owner_name.value
    'Петров П.П.'
"""

import logging
from datetime import date

from ..entities.ownership import OwnershipRecord
from ..entities.property import Property
from ..exceptions import require
from ..result import Result

logger = logging.getLogger(__name__)


class OwnershipTransferService:
    """Moves ownership of a property from its current owner to a new one.

    The service holds no state; all changes are made to the given property.
    """

    def transfer(
        self,
        prop: Property,
        new_owner_name: str,
        transfer_date: date,
        reason: str,
    ) -> Result[OwnershipRecord]:
        """Record a change of ownership.

        The current owner's open period is closed at ``transfer_date`` when that
        date is not before the period's start. The new owner's record is then
        added to the property's history.

        Args:
            prop: Property changing hands
            new_owner_name: Full name of the new owner
            transfer_date: First day of the new ownership
            reason: Legal basis of the transfer

        Returns:
            Result with the new owner's record, or the validation errors of the
            record (nothing is changed on failure)

        Raises:
            RequiredArgumentError: If prop is None
        """
        require(prop, "property")

        record_result = OwnershipRecord.create(new_owner_name, transfer_date, reason)
        if record_result.is_failure:
            logger.warning(
                "Rejected ownership transfer",
                extra={"property_id": str(prop.id), "errors": record_result.error},
            )
            return record_result

        previous = prop.get_current_owner()
        if (
            previous is not None
            and previous.is_current_owner()
            and transfer_date >= previous.start_date
        ):
            previous.set_end_date(transfer_date)

        new_record = record_result.value
        prop.add_ownership_record(new_record)

        logger.info(
            "Transferred property ownership",
            extra={
                "property_id": str(prop.id),
                "previous_owner": previous.owner_name.value if previous else None,
                "new_owner": new_record.owner_name.value,
                "transfer_date": transfer_date.isoformat(),
                "reason": new_record.ownership_reason,
            },
        )
        return record_result
