"""
Unit tests for DealCompletionService.
"""

# Standard library imports
import logging
from datetime import date

# Third-party imports
import pytest

# Local imports
from realty.domain.entities import Deal, DealStatus
from realty.domain.services import DealCompletionService
from realty.domain.value_objects import ClientId, DealDetails, Price, PropertyStatus


@pytest.fixture
def service() -> DealCompletionService:
    return DealCompletionService()


@pytest.fixture
def deal(client, listed_property) -> Deal:
    details = DealDetails(date(2024, 5, 20), Price(5_000_000), "Покупка")
    return Deal.create(client.id, listed_property.id, None, details).value


class TestDealCompletion:
    """Test completing a deal across aggregates."""

    def test_completes_deal_property_and_client(self, service, deal, listed_property, client):
        result = service.complete(deal, listed_property, client)

        assert result.is_success
        completed = result.value
        assert deal.status == DealStatus.COMPLETED
        assert listed_property.status == PropertyStatus.SOLD
        assert client.completed_deal_ids == (completed.id,)
        assert completed.deal_amount == Price(5_000_000)

    def test_mismatched_client_rejected(self, service, listed_property, client):
        details = DealDetails(date(2024, 5, 20), Price(5_000_000), "Покупка")
        other = Deal.create(ClientId.new(), listed_property.id, None, details).value

        result = service.complete(other, listed_property, client)

        assert result.error == "Сделка относится к другому клиенту"
        assert other.status == DealStatus.CREATED
        assert listed_property.status == PropertyStatus.FOR_SALE
        assert client.completed_deal_ids == ()

    def test_cancelled_deal_rejected(self, service, deal, listed_property, client):
        deal.cancel()

        assert service.complete(deal, listed_property, client).is_failure
        assert listed_property.is_available()

    def test_logs_completion(self, service, deal, listed_property, client, caplog):
        with caplog.at_level(logging.INFO):
            service.complete(deal, listed_property, client)

        record = next(r for r in caplog.records if r.message == "Completed deal")
        assert record.deal_id == str(deal.id)
        assert record.amount == 5_000_000.0

    def test_completed_deal_cannot_be_completed_again(
        self, service, deal, listed_property, client, caplog
    ):
        first = service.complete(deal, listed_property, client)

        with caplog.at_level(logging.WARNING):
            second = service.complete(deal, listed_property, client)

        assert second.is_failure
        assert second.error == "Сделка уже завершена"
        assert client.completed_deal_ids == (first.value.id,)
        assert "Rejected deal completion" in caplog.text
