"""
Unit tests for OwnershipRecord and OwnershipHistory.
"""

# Standard library imports
from datetime import date

# Third-party imports
import pytest

# Local imports
from realty.domain.entities import OwnershipHistory, OwnershipRecord
from realty.domain.exceptions import RequiredArgumentError, ValidationError


def make_record(name: str, start: date, reason: str = "Покупка", end: date | None = None):
    return OwnershipRecord.create(name, start, reason, end).value


class TestOwnershipRecord:
    """Test OwnershipRecord creation and closing."""

    def test_open_record_is_current_owner(self):
        record = make_record("Иванов И.И.", date(2020, 1, 1))

        assert record.is_current_owner()
        assert record.owner_name.value == "Иванов И.И."
        assert record.end_date is None

    def test_closed_record_is_not_current_owner(self):
        record = make_record("Иванов И.И.", date(2020, 1, 1), end=date(2021, 1, 1))
        assert not record.is_current_owner()

    def test_collects_all_errors(self):
        result = OwnershipRecord.create("", None, " ")

        assert result.errors == (
            "Имя не может быть пустым",
            "Дата начала владения не может быть пустой",
            "Основание владения не может быть пустым",
        )

    def test_end_before_start_rejected(self):
        result = OwnershipRecord.create("Иванов", date(2020, 1, 2), "Покупка", date(2020, 1, 1))
        assert result.error == "Дата окончания владения не может быть раньше даты начала"

    def test_start_placeholder_date_rejected(self):
        assert OwnershipRecord.create("Иванов", date.min, "Покупка").is_failure

    def test_set_end_date(self):
        record = make_record("Иванов", date(2020, 1, 1))
        record.set_end_date(date(2020, 1, 1))

        assert record.end_date == date(2020, 1, 1)
        assert not record.is_current_owner()

    def test_set_end_date_validation(self):
        record = make_record("Иванов", date(2020, 1, 1))

        with pytest.raises(RequiredArgumentError):
            record.set_end_date(None)  # type: ignore[arg-type]
        with pytest.raises(ValidationError):
            record.set_end_date(date(2019, 12, 31))
        assert record.is_current_owner()

    def test_value_equality(self):
        assert make_record("Иванов", date(2020, 1, 1)) == make_record("иванов", date(2020, 1, 1))
        assert make_record("Иванов", date(2020, 1, 1)) != make_record("Иванов", date(2020, 1, 2))


class TestOwnershipHistory:
    """Test ordering and current-owner policy."""

    def test_empty_history(self):
        history = OwnershipHistory()

        assert history.is_empty()
        assert history.get_current_owner() is None
        assert len(history) == 0

    def test_records_sorted_by_start_date(self):
        history = OwnershipHistory()
        history.add_record(make_record("Третий", date(2022, 1, 1)))
        history.add_record(make_record("Первый", date(2010, 1, 1)))
        history.add_record(make_record("Второй", date(2015, 1, 1)))

        starts = [record.start_date for record in history]
        assert starts == sorted(starts)

    def test_current_owner_has_latest_start_even_when_closed(self):
        history = OwnershipHistory()
        history.add_record(make_record("Старый", date(2010, 1, 1)))
        latest = make_record("Новый", date(2020, 1, 1), end=date(2021, 1, 1))
        history.add_record(latest)

        assert history.get_current_owner() is latest

    def test_tie_on_start_date_last_added_wins(self):
        history = OwnershipHistory()
        first = make_record("Первый", date(2020, 1, 1))
        second = make_record("Второй", date(2020, 1, 1))
        history.add_record(first)
        history.add_record(second)

        assert history.get_current_owner() is second
        assert history.records == (first, second)

    def test_remove_by_value(self):
        history = OwnershipHistory()
        history.add_record(make_record("Первый", date(2010, 1, 1)))
        history.add_record(make_record("Второй", date(2015, 1, 1)))

        assert history.remove_record(make_record("Первый", date(2010, 1, 1)))
        assert [record.owner_name.value for record in history] == ["Второй"]
        assert not history.remove_record(make_record("Первый", date(2010, 1, 1)))

    def test_none_arguments_raise(self):
        history = OwnershipHistory()

        with pytest.raises(RequiredArgumentError):
            history.add_record(None)  # type: ignore[arg-type]
        with pytest.raises(RequiredArgumentError):
            history.remove_record(None)  # type: ignore[arg-type]

    def test_records_snapshot_is_read_only(self):
        history = OwnershipHistory()
        history.add_record(make_record("Первый", date(2010, 1, 1)))

        assert isinstance(history.records, tuple)
