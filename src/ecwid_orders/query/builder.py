"""Fluent builder for order search query parameters."""

import logging
from datetime import date
from types import MappingProxyType
from typing import Any, Collection, Mapping, Optional, Union

from ..constants import (
    FULFILLMENT_STATUSES,
    LEGACY_FULFILLMENT_STATUSES,
    LEGACY_PAYMENT_STATUSES,
    PARAM_KEYS,
    PAYMENT_STATUSES,
)
from ..exceptions import InvalidArgumentError
from ..utils.validators import (
    check,
    split_statuses,
    validate_custom_param,
    validate_date,
    validate_new_legacy_statuses,
    validate_non_negative,
    validate_statuses,
    validate_text,
)

logger = logging.getLogger(__name__)

DateValue = Union[str, date]
Number = Union[int, float]


class OrdersQueryBuilder:
    """Accumulates validated filter parameters for an orders request.

    Every setter validates before writing and returns the builder, so calls
    can be chained. A failed call raises InvalidArgumentError and leaves the
    parameters exactly as they were.

    Status setters accumulate: repeated calls union the statuses already
    stored under the key. Every other setter overwrites.
    """

    def __init__(self, legacy: bool = False) -> None:
        """Initialize an empty query.

        Args:
            legacy: Validate statuses against the legacy API whitelists
        """
        self.legacy = legacy
        self.fulfillment_whitelist = LEGACY_FULFILLMENT_STATUSES if legacy else FULFILLMENT_STATUSES
        self.payment_whitelist = LEGACY_PAYMENT_STATUSES if legacy else PAYMENT_STATUSES
        self._params: dict[str, Any] = {}

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def __repr__(self) -> str:
        return f"{type(self).__name__}(legacy={self.legacy}, params={self._params!r})"

    def _set(self, key: str, value: Any) -> "OrdersQueryBuilder":
        self._params[key] = value
        logger.debug(f"Query parameter {key} set to {value!r}")
        return self

    def get_param(self, key: str) -> Optional[Any]:
        """Return the stored value for a key, or None if it was never set."""
        return self._params.get(key)

    def snapshot(self) -> Mapping[str, Any]:
        """Return a read-only copy of the accumulated parameters."""
        return MappingProxyType(dict(self._params))

    # Statuses

    def add_or_update_statuses(
        self, statuses: str, available: Optional[Collection[str]], key: str
    ) -> "OrdersQueryBuilder":
        """Validate statuses and merge them into the ones stored under key.

        Args:
            statuses: Comma and/or space delimited statuses
            available: Whitelist the statuses are checked against
            key: Query parameter to accumulate into

        Returns:
            The builder

        Raises:
            InvalidArgumentError: If the statuses fail validation
        """
        try:
            tokens = validate_statuses(statuses, available, key)
        except InvalidArgumentError as e:
            logger.debug(f"Rejected {key}={statuses!r}: {e.category}")
            raise

        current = self._params.get(key)
        merged = split_statuses(str(current)) if current else []
        merged.extend(token for token in tokens if token not in merged)

        return self._set(key, ",".join(merged))

    def fulfillment_statuses(self, statuses: str) -> "OrdersQueryBuilder":
        return self.add_or_update_statuses(
            statuses, self.fulfillment_whitelist, PARAM_KEYS["fulfillment_status"]
        )

    def payment_statuses(self, statuses: str) -> "OrdersQueryBuilder":
        return self.add_or_update_statuses(statuses, self.payment_whitelist, PARAM_KEYS["payment_status"])

    def validate_new_statuses(self, *statuses: Optional[str]) -> "OrdersQueryBuilder":
        """Check the query is safe to use for a bulk status update."""
        validate_new_legacy_statuses(self._params, *statuses)
        return self

    # Dates

    def _date(self, name: str, value: DateValue) -> "OrdersQueryBuilder":
        key = PARAM_KEYS[name]
        return self._set(key, validate_date(value, key))

    def _date_range(self, prefix: str, date_from: DateValue, date_to: DateValue) -> "OrdersQueryBuilder":
        from_key = PARAM_KEYS[f"{prefix}_from"]
        to_key = PARAM_KEYS[f"{prefix}_to"]
        start = check(validate_date, date_from, from_key)
        end = check(validate_date, date_to, to_key)

        # Nothing is written unless both ends are valid
        start_value, end_value = start.unwrap(), end.unwrap()
        self._set(from_key, start_value)
        return self._set(to_key, end_value)

    def created_from(self, value: DateValue) -> "OrdersQueryBuilder":
        return self._date("created_from", value)

    def created_to(self, value: DateValue) -> "OrdersQueryBuilder":
        return self._date("created_to", value)

    def created(self, date_from: DateValue, date_to: DateValue) -> "OrdersQueryBuilder":
        """Set both ends of the creation date range."""
        return self._date_range("created", date_from, date_to)

    def updated_from(self, value: DateValue) -> "OrdersQueryBuilder":
        return self._date("updated_from", value)

    def updated_to(self, value: DateValue) -> "OrdersQueryBuilder":
        return self._date("updated_to", value)

    def updated(self, date_from: DateValue, date_to: DateValue) -> "OrdersQueryBuilder":
        """Set both ends of the last update date range."""
        return self._date_range("updated", date_from, date_to)

    # Numbers

    def _number(self, name: str, value: Number, cast: Optional[type] = None) -> "OrdersQueryBuilder":
        key = PARAM_KEYS[name]
        value = validate_non_negative(value, key)
        return self._set(key, cast(value) if cast else value)

    def total_from(self, value: Number) -> "OrdersQueryBuilder":
        return self._number("total_from", value, float)

    def total_to(self, value: Number) -> "OrdersQueryBuilder":
        return self._number("total_to", value, float)

    def totals(self, total_from: Number, total_to: Number) -> "OrdersQueryBuilder":
        """Set both ends of the order total range."""
        start = check(validate_non_negative, total_from, PARAM_KEYS["total_from"])
        end = check(validate_non_negative, total_to, PARAM_KEYS["total_to"])

        start_value, end_value = float(start.unwrap()), float(end.unwrap())
        self._set(PARAM_KEYS["total_from"], start_value)
        return self._set(PARAM_KEYS["total_to"], end_value)

    def limit(self, value: int) -> "OrdersQueryBuilder":
        return self._number("limit", value)

    def offset(self, value: int) -> "OrdersQueryBuilder":
        return self._number("offset", value)

    def coupon_code(self, value: int) -> "OrdersQueryBuilder":
        return self._number("coupon_code", value)

    def order_number(self, value: int) -> "OrdersQueryBuilder":
        return self._number("order_number", value)

    # Text

    def _text(self, name: str, value: str) -> "OrdersQueryBuilder":
        key = PARAM_KEYS[name]
        return self._set(key, validate_text(value, key))

    def vendor_order_number(self, value: str) -> "OrdersQueryBuilder":
        return self._text("vendor_order_number", value)

    def order(self, value: Union[int, str]) -> "OrdersQueryBuilder":
        """Filter by order number (int) or vendor order number (str)."""
        if isinstance(value, str) or value is None:
            return self.vendor_order_number(value)
        return self.order_number(value)

    def customer(self, value: str) -> "OrdersQueryBuilder":
        return self._text("customer", value)

    def keywords(self, value: str) -> "OrdersQueryBuilder":
        return self._text("keywords", value)

    def payment_method(self, value: str) -> "OrdersQueryBuilder":
        return self._text("payment_method", value)

    def shipping_method(self, value: str) -> "OrdersQueryBuilder":
        return self._text("shipping_method", value)

    def custom(self, key: str, value: Any) -> "OrdersQueryBuilder":
        """Set an arbitrary query parameter not covered by other setters.

        Status keys are routed through their status setters so their values
        are always validated and accumulated.
        """
        key, value = validate_custom_param(key, value)

        if key == PARAM_KEYS["fulfillment_status"]:
            return self.fulfillment_statuses(value)
        if key == PARAM_KEYS["payment_status"]:
            return self.payment_statuses(value)

        return self._set(key, value)
