"""
Unit tests for Deal and CompletedDeal.
"""

# Standard library imports
from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta

# Third-party imports
import pytest

# Local imports
from realty.domain.entities import CompletedDeal, Deal, DealStatus
from realty.domain.exceptions import RequiredArgumentError
from realty.domain.value_objects import ClientId, DealDetails, Document, Price, PropertyId


@pytest.fixture
def deal_details() -> DealDetails:
    return DealDetails(date(2024, 5, 20), Price(5_000_000), "Покупка", "Ипотека")


@pytest.fixture
def deal(deal_details) -> Deal:
    return Deal.create(ClientId.new(), PropertyId.new(), None, deal_details).value


class TestDealStatus:
    """Test DealStatus helpers."""

    @pytest.mark.parametrize("code", ["completed", "Completed", " COMPLETED "])
    def test_from_code_case_insensitive(self, code):
        assert DealStatus.from_code(code) is DealStatus.COMPLETED

    @pytest.mark.parametrize("code", [None, "", "archived"])
    def test_from_code_unknown(self, code):
        assert DealStatus.from_code(code) is None

    def test_display_name(self):
        assert str(DealStatus.CREATED) == "Создана"


class TestDeal:
    """Test Deal lifecycle and documents."""

    def test_create(self, deal):
        assert deal.status == DealStatus.CREATED
        assert deal.booking_id is None
        assert deal.documents == ()

    def test_create_requires_ids_and_details(self):
        assert len(Deal.create(None, None, None, None).errors) == 3

    def test_status_changes_unguarded(self, deal):
        deal.complete()
        deal.confirm()

        assert deal.status == DealStatus.CONFIRMED
        assert deal.updated_at is not None

    def test_add_document_ignores_duplicates(self, deal):
        document = Document("Договор купли-продажи", "pdf", "/deals/contract.pdf")
        deal.add_document(document)
        deal.add_document(document)

        assert deal.documents == (document,)

    def test_remove_document_by_id(self, deal):
        document = Document("Акт", "pdf", "/deals/act.pdf")
        deal.add_document(document)

        assert deal.remove_document(document.id)
        assert not deal.remove_document(document.id)

    def test_add_none_document_raises(self, deal):
        with pytest.raises(RequiredArgumentError):
            deal.add_document(None)  # type: ignore[arg-type]


class TestCompletedDeal:
    """Test CompletedDeal creation."""

    def test_create(self):
        result = CompletedDeal.create(
            ClientId.new(), PropertyId.new(), date(2024, 1, 10), Price(100), "Покупка"
        )

        assert result.is_success
        assert result.value.deal_type == "Покупка"

    def test_future_date_rejected(self):
        result = CompletedDeal.create(
            ClientId.new(),
            PropertyId.new(),
            date.today() + timedelta(days=1),
            Price(100),
            "Покупка",
        )
        assert result.error == "Дата сделки не может быть в будущем"

    def test_collects_all_errors(self):
        assert len(CompletedDeal.create(None, None, None, None, " ").errors) == 5

    def test_from_deal_requires_completion(self, deal):
        assert CompletedDeal.from_deal(deal).is_failure

        deal.complete()
        completed = CompletedDeal.from_deal(deal).value

        assert completed.client_id == deal.client_id
        assert completed.deal_amount == deal.details.deal_amount

    def test_datetime_date_stored_as_day(self):
        result = CompletedDeal.create(
            ClientId.new(), PropertyId.new(), datetime(2024, 1, 10, 15, 30), Price(100), "Покупка"
        )

        assert result.is_success
        assert result.value.deal_date == date(2024, 1, 10)
        assert type(result.value.deal_date) is date

    def test_non_string_deal_type_rejected(self):
        result = CompletedDeal.create(
            ClientId.new(), PropertyId.new(), date(2024, 1, 10), Price(100), 5  # type: ignore[arg-type]
        )
        assert result.error == "Тип сделки должен быть строкой"

    def test_record_is_frozen(self):
        completed = CompletedDeal.create(
            ClientId.new(), PropertyId.new(), date(2024, 1, 10), Price(100), "Покупка"
        ).value

        with pytest.raises(FrozenInstanceError):
            completed.deal_amount = Price(1)  # type: ignore[misc]
        assert completed.deal_amount == Price(100)
        assert completed in {completed}
