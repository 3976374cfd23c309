"""
Unit tests for Booking creation and status transitions.
"""

# Standard library imports
from datetime import date

# Third-party imports
import pytest

# Local imports
from realty.domain.entities import Booking, BookingStatus
from realty.domain.exceptions import InvalidStateTransitionError
from realty.domain.value_objects import Period, Price, PropertyStatus


@pytest.fixture
def period() -> Period:
    return Period(date(2024, 6, 1), date(2024, 6, 30))


@pytest.fixture
def booking(client, listed_property, agency, period) -> Booking:
    return Booking.create(client, listed_property, agency, period, Price(5_000_000)).value


class TestBookingCreation:
    """Test Booking.create"""

    def test_keeps_identity_references(self, booking, client, listed_property, agency):
        assert booking.client_id == client.id
        assert booking.property_id == listed_property.id
        assert booking.agency_id == agency.id
        assert booking.status == BookingStatus.PENDING

    def test_price_must_match_property(self, client, listed_property, agency, period):
        result = Booking.create(client, listed_property, agency, period, Price(4_000_000))

        assert result.is_failure
        assert "4 000 000,00 ₽" in result.error
        assert "5 000 000,00 ₽" in result.error

    def test_all_arguments_required(self):
        assert len(Booking.create(None, None, None, None, None).errors) == 5

    def test_no_side_effect_on_property(self, booking, listed_property):
        assert listed_property.status == PropertyStatus.FOR_SALE


class TestBookingTransitions:
    """Test the booking status machine."""

    def test_happy_path(self, booking):
        booking.confirm()
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.is_active()

        booking.complete()
        assert booking.status == BookingStatus.COMPLETED
        assert booking.is_terminal()
        assert booking.updated_at is not None

    @pytest.mark.parametrize("confirm_first", [False, True])
    def test_cancel_from_active_states(self, booking, confirm_first):
        if confirm_first:
            booking.confirm()
        booking.cancel()

        assert booking.status == BookingStatus.CANCELLED
        assert not booking.is_active()

    def test_complete_requires_confirmation(self, booking):
        with pytest.raises(InvalidStateTransitionError) as exc_info:
            booking.complete()

        assert exc_info.value.current_state == "ожидает подтверждения"
        assert exc_info.value.attempted_state == "завершено"
        assert booking.status == BookingStatus.PENDING

    @pytest.mark.parametrize("action", ["confirm", "complete", "cancel"])
    def test_terminal_states_reject_transitions(self, booking, action):
        booking.cancel()

        with pytest.raises(InvalidStateTransitionError):
            getattr(booking, action)()

    def test_confirm_twice_rejected(self, booking):
        booking.confirm()
        with pytest.raises(InvalidStateTransitionError):
            booking.confirm()
