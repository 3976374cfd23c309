"""
Unit tests for Result and the value object base classes.
"""

# Third-party imports
import pytest

# Local imports
from realty.domain.exceptions import ValidationError
from realty.domain.result import Result
from realty.domain.value_objects import AgencyId, ClientId, Name, Price, PropertyId


class TestResult:
    """Test Result success and failure semantics."""

    def test_success_wraps_value(self):
        result = Result.success(42)

        assert result.is_success
        assert not result.is_failure
        assert result.value == 42
        assert result.errors == ()
        assert result.error == ""

    def test_failure_joins_errors(self):
        result = Result.failure(["first", "second"])

        assert result.is_failure
        assert result.errors == ("first", "second")
        assert result.error == "first; second"

    def test_failure_from_single_message(self):
        assert Result.failure("only").errors == ("only",)

    def test_failure_requires_message(self):
        with pytest.raises(ValueError):
            Result.failure([])

    def test_value_of_failure_raises(self):
        with pytest.raises(ValidationError, match="broken"):
            _ = Result.failure("broken").value

    def test_value_or(self):
        assert Result.success(1).value_or(5) == 1
        assert Result.failure("x").value_or(5) == 5

    def test_from_errors_builds_only_when_valid(self):
        calls = []

        def build():
            calls.append(True)
            return "built"

        assert Result.from_errors(["bad"], build).is_failure
        assert calls == []
        assert Result.from_errors([], build).value == "built"
        assert calls == [True]


class TestValueObjectBase:
    """Test equality, hashing and immutability shared by all value objects."""

    def test_equal_values_are_equal_and_hash_alike(self):
        assert Price(100) == Price("100")
        assert hash(Price(100)) == hash(Price("100"))
        assert len({Price(100), Price(100), Price(200)}) == 2

    def test_different_types_are_never_equal(self):
        assert Name("Иван") != "Иван"

    def test_immutable(self):
        price = Price(100)
        with pytest.raises(AttributeError):
            price._value = 5  # type: ignore[misc]

    def test_ordering_within_type(self):
        assert Price(100) < Price(200)
        assert max(Price(5), Price(50), Price(10)) == Price(50)

    def test_ordering_across_types_raises(self):
        with pytest.raises(TypeError):
            _ = Price(100) < Name("Иван")  # type: ignore[operator]

    def test_constructor_raises_with_all_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            Name("1")

        assert "минимум 2 символа" in exc_info.value.message
        assert "только буквы" in exc_info.value.message
        assert exc_info.value.field == "Name"


class TestTypedIds:
    """Test typed identifiers."""

    def test_new_ids_are_unique(self):
        assert PropertyId.new() != PropertyId.new()

    def test_ids_of_different_types_never_equal(self):
        property_id = PropertyId.new()
        client_id = ClientId(property_id.value)

        assert property_id != client_id
        assert property_id.value == client_id.value

    def test_create_from_string(self):
        original = AgencyId.new()
        parsed = AgencyId.create(str(original.value))

        assert parsed.is_success
        assert parsed.value == original

    def test_create_rejects_malformed_and_empty(self):
        assert AgencyId.create("not-a-uuid").is_failure
        assert AgencyId.create(None).error == "ID не может быть пустым"
        assert AgencyId.create("00000000-0000-0000-0000-000000000000").is_failure

    def test_parse_raises_on_bad_input(self):
        with pytest.raises(ValidationError):
            ClientId.parse("garbage")
