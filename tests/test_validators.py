"""Unit tests for order query validators."""

import itertools
from datetime import date, datetime

import pytest

from ecwid_orders.constants import (
    FULFILLMENT_STATUSES,
    LEGACY_FULFILLMENT_STATUSES,
    LEGACY_PAYMENT_STATUSES,
    PAYMENT_STATUSES,
)
from ecwid_orders.exceptions import InvalidArgumentError
from ecwid_orders.utils.validators import (
    ValidationOutcome,
    are_null_or_empty,
    check,
    is_null_or_empty,
    validate_custom_param,
    validate_date,
    validate_new_legacy_statuses,
    validate_non_negative,
    validate_single_status,
    validate_statuses,
    validate_text,
)


class TestStatusValidators:
    """Test status list validation."""

    def test_space_delimited_statuses(self):
        """Test statuses separated by whitespace."""
        result = validate_statuses("AWAITING_PROCESSING PROCESSING", FULFILLMENT_STATUSES)
        assert result == ["AWAITING_PROCESSING", "PROCESSING"]
        assert ",".join(result) == "AWAITING_PROCESSING,PROCESSING"

    def test_mixed_separators_and_case(self):
        """Test commas, runs of whitespace and lowercase input."""
        result = validate_statuses(" paid,, Cancelled \t incomplete ", PAYMENT_STATUSES)
        assert result == ["PAID", "CANCELLED", "INCOMPLETE"]

    def test_duplicates_removed_in_first_seen_order(self):
        result = validate_statuses("shipped, DELIVERED shipped Delivered", FULFILLMENT_STATUSES)
        assert result == ["SHIPPED", "DELIVERED"]

    @pytest.mark.parametrize("size", [1, 2, 3])
    def test_any_whitelist_combination(self, size):
        """Test every combination of current payment statuses."""
        for combo in itertools.combinations(sorted(PAYMENT_STATUSES), size):
            raw = ", ".join(status.lower() for status in combo)
            assert validate_statuses(raw, PAYMENT_STATUSES) == list(combo)

    def test_idempotent_on_own_output(self):
        first = validate_statuses("processing awaiting_processing", FULFILLMENT_STATUSES)
        second = validate_statuses(",".join(first), FULFILLMENT_STATUSES)
        assert first == second

    def test_unknown_status(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_statuses("PAID, DECLINE", PAYMENT_STATUSES)
        assert exc_info.value.category == "invalid_status"
        assert "DECLINE" in str(exc_info.value)

    def test_legacy_only_status_rejected_by_current_whitelist(self):
        """NEW exists only in the legacy fulfillment whitelist."""
        assert validate_statuses("NEW", LEGACY_FULFILLMENT_STATUSES) == ["NEW"]
        with pytest.raises(InvalidArgumentError):
            validate_statuses("NEW", FULFILLMENT_STATUSES)

    @pytest.mark.parametrize("statuses", [None, "", "   ", " , ,"])
    def test_missing_statuses(self, statuses):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_statuses(statuses, PAYMENT_STATUSES)
        assert exc_info.value.category == "missing_value"

    @pytest.mark.parametrize("available", [None, [], frozenset()])
    def test_invalid_whitelist(self, available):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_statuses("PAID", available)
        assert exc_info.value.category == "invalid_whitelist"
        assert exc_info.value.field == "available"

    def test_empty_statuses_checked_before_whitelist(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_statuses("", None)
        assert exc_info.value.category == "missing_value"

    def test_legacy_chargeable_refunded_is_one_member(self):
        """The combined legacy entry is never matched by split tokens."""
        assert "CHARGEABLE, REFUNDED" in LEGACY_PAYMENT_STATUSES
        with pytest.raises(InvalidArgumentError):
            validate_statuses("CHARGEABLE", LEGACY_PAYMENT_STATUSES)
        with pytest.raises(InvalidArgumentError):
            validate_statuses("REFUNDED", LEGACY_PAYMENT_STATUSES)

    def test_whitelist_not_mutated(self):
        before = set(PAYMENT_STATUSES)
        validate_statuses("paid cancelled", PAYMENT_STATUSES)
        assert set(PAYMENT_STATUSES) == before

    def test_single_status(self):
        assert validate_single_status(" shipped ", LEGACY_FULFILLMENT_STATUSES) == "SHIPPED"

    def test_single_status_rejects_many(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_single_status("SHIPPED, DELIVERED", LEGACY_FULFILLMENT_STATUSES)
        assert exc_info.value.category == "multiple_statuses"

    def test_single_status_duplicate_counts_once(self):
        assert validate_single_status("paid PAID", PAYMENT_STATUSES) == "PAID"


class TestDateValidator:
    """Test date filter validation."""

    @pytest.mark.parametrize(
        "value",
        [
            "2015-04-22",
            "2015-04-22 18:48:38",
            "2015-04-22 18:48:38 -0500",
            "2015-04-22T18:48:38",
            "2015-04-22T18:48:38Z",
            "1447804800",
        ],
    )
    def test_valid_strings_unchanged(self, value):
        assert validate_date(value, "createdFrom") == value

    def test_native_datetime(self):
        assert validate_date(datetime(2015, 4, 22, 18, 48, 38)) == "2015-04-22 18:48:38"

    def test_native_date_is_midnight(self):
        assert validate_date(date(2015, 4, 22)) == "2015-04-22 00:00:00"

    @pytest.mark.parametrize(
        "value",
        [
            "2015-00-22",
            "2015-00-22 18:48:38",
            "2015-00-22 18:48:38 -0500",
            "2015-02-30",
            "2015-04-22 25:00:00",
            "-1",
            "0",
            " ",
            "yesterday",
            "1_000",
            "1" * 58,
            "1" * 60,
            str(2**63),
            "١٢٣",
            "２０１５-04-22",
            "2015-04-22 1８:48:38",
        ],
    )
    def test_invalid_dates(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_date(value, "createdFrom")
        assert exc_info.value.category == "invalid_date"
        assert exc_info.value.field == "createdFrom"

    def test_largest_timestamp_accepted(self):
        assert validate_date(str(2**63 - 1)) == str(2**63 - 1)

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_date(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_date(value)
        assert exc_info.value.category == "missing_value"

    def test_non_string_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_date(1447804800)  # type: ignore


class TestNumericValidator:
    """Test numeric range endpoint validation."""

    @pytest.mark.parametrize("value", [0, 1, 12, 120, 0.0, 99.95, 10**12])
    def test_non_negative_accepted(self, value):
        assert validate_non_negative(value, "limit") == value

    @pytest.mark.parametrize("value", [-1, -0.01])
    def test_negative_rejected(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_non_negative(value, "totalFrom")
        assert exc_info.value.category == "negative_number"
        assert exc_info.value.field == "totalFrom"

    @pytest.mark.parametrize("value", ["1", None, True, float("nan"), float("inf")])
    def test_not_a_number(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_non_negative(value, "limit")  # type: ignore
        assert exc_info.value.category == "invalid_number"

    @pytest.mark.parametrize("value", [10**400, -(10**400)])
    def test_int_too_large_for_float(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_non_negative(value, "totalTo")
        assert exc_info.value.category == "invalid_number"
        assert exc_info.value.field == "totalTo"


class TestTextValidators:
    """Test free text and custom parameter validation."""

    def test_text_unchanged(self):
        assert validate_text(" John Smith ", "customer") == " John Smith "
        assert validate_text("lowercase", "keywords") == "lowercase"

    @pytest.mark.parametrize("value", [None, "", "  \t"])
    def test_blank_text(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_text(value, "customer")
        assert exc_info.value.category == "missing_value"
        assert exc_info.value.field == "customer"

    def test_custom_param(self):
        assert validate_custom_param("date", "test") == ("date", "test")
        assert validate_custom_param("flag", 0) == ("flag", 0)

    @pytest.mark.parametrize(
        "key,value,field",
        [
            (None, {"a": 1}, "key"),
            (None, None, "key"),
            ("", {"a": 1}, "key"),
            (" ", {"a": 1}, "key"),
            ("date", None, "value"),
        ],
    )
    def test_custom_param_invalid(self, key, value, field):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_custom_param(key, value)
        assert exc_info.value.field == field

    def test_null_or_empty_helpers(self):
        assert is_null_or_empty(None) is True
        assert is_null_or_empty(" ") is True
        assert is_null_or_empty("x") is False
        assert are_null_or_empty(None, "", "  ") is True
        assert are_null_or_empty(None, "PAID") is False


class TestBulkUpdateGuard:
    """Test the pre-flight check for bulk status updates."""

    def test_paging_only_query_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_new_legacy_statuses({"limit": 10, "offset": 0}, "SHIPPED")
        assert exc_info.value.category == "empty_query"

    def test_empty_query_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_new_legacy_statuses({}, "SHIPPED")

    def test_all_blank_statuses_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_new_legacy_statuses({"customer": "John"}, None, "", " ")
        assert exc_info.value.category == "missing_value"

    def test_scoped_query_with_status(self):
        validate_new_legacy_statuses({"limit": 10, "offset": 0, "customer": "John"}, None, "PAID")


class TestValidationOutcome:
    """Test capturing validator results."""

    def test_ok_outcome(self):
        outcome = check(validate_non_negative, 5, "limit")
        assert outcome.ok is True
        assert outcome.unwrap() == 5

    def test_failed_outcome(self):
        outcome = check(validate_text, "", "customer")
        assert outcome.ok is False
        assert outcome.error.field == "customer"
        with pytest.raises(InvalidArgumentError):
            outcome.unwrap()

    def test_outcome_is_frozen(self):
        outcome = ValidationOutcome(value=1)
        with pytest.raises(AttributeError):
            outcome.value = 2  # type: ignore
