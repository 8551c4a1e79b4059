"""Input validation utilities for Ecwid order query parameters."""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Collection, Mapping, Optional, Union

from ..constants import (
    CANONICAL_DATE_FORMAT,
    DATE_INPUT_FORMATS,
    DATE_PREFIX_PATTERN,
    MAX_TIMESTAMP,
    PAGING_KEYS,
)
from ..exceptions import InvalidArgumentError

_STATUS_SEPARATORS = re.compile(r"[\s,]+")
_DATE_PREFIX = re.compile(DATE_PREFIX_PATTERN, re.ASCII)
_TIMESTAMP = re.compile(r"^[+-]?\d+$", re.ASCII)


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of running a validator: a normalized value or the error."""

    value: Any = None
    error: Optional[InvalidArgumentError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the normalized value, raising the captured error if any."""
        if self.error is not None:
            raise self.error
        return self.value


def check(validator: Callable[..., Any], *args: Any, **kwargs: Any) -> ValidationOutcome:
    """Run a validator and capture its failure instead of raising.

    Args:
        validator: Any validator from this module
        *args: Positional arguments passed to the validator
        **kwargs: Keyword arguments passed to the validator

    Returns:
        ValidationOutcome holding either the normalized value or the error
    """
    try:
        return ValidationOutcome(value=validator(*args, **kwargs))
    except InvalidArgumentError as e:
        return ValidationOutcome(error=e)


def is_null_or_empty(value: Optional[str]) -> bool:
    """Return True for None, empty or whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def are_null_or_empty(*values: Optional[str]) -> bool:
    """Return True if every given string is None, empty or whitespace-only."""
    return all(is_null_or_empty(value) for value in values)


def split_statuses(statuses: str) -> list[str]:
    """Uppercase a delimited status string and split it into unique tokens.

    Tokens are separated by any run of whitespace and/or commas. Order of
    first appearance is preserved.
    """
    tokens = _STATUS_SEPARATORS.split(statuses.strip().upper())
    return list(dict.fromkeys(token for token in tokens if token))


def validate_statuses(statuses: str, available: Optional[Collection[str]], field: str = "statuses") -> list[str]:
    """Validate a comma/space-delimited status list against a whitelist.

    Args:
        statuses: Raw statuses string, e.g. "paid, cancelled"
        available: Whitelist of allowed status tokens
        field: Parameter name reported on failure

    Returns:
        Normalized (uppercase) unique statuses in order of first appearance

    Raises:
        InvalidArgumentError: If the input or whitelist is empty, or a token
            is not in the whitelist
    """
    if is_null_or_empty(statuses):
        raise InvalidArgumentError("missing_value", field)

    if not available:
        raise InvalidArgumentError("invalid_whitelist", "available")

    if not isinstance(statuses, str):
        raise InvalidArgumentError("invalid_status", field)

    tokens = split_statuses(statuses)
    if not tokens:
        raise InvalidArgumentError("missing_value", field)

    unknown = [token for token in tokens if token not in available]
    if unknown:
        raise InvalidArgumentError(
            "invalid_status", field, f"Statuses string is invalid: {', '.join(unknown)}"
        )

    return tokens


def validate_single_status(status: str, available: Optional[Collection[str]], field: str = "status") -> str:
    """Validate a string holding exactly one status.

    Args:
        status: Raw status string
        available: Whitelist of allowed status tokens
        field: Parameter name reported on failure

    Returns:
        The normalized (uppercase) status

    Raises:
        InvalidArgumentError: On any validate_statuses failure, or when more
            than one status is given
    """
    tokens = validate_statuses(status, available, field)

    if len(tokens) > 1:
        raise InvalidArgumentError("multiple_statuses", field)

    return tokens[0]


def _parse_calendar_date(value: str) -> Optional[datetime]:
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    try:
        # Handle both with and without 'Z' suffix
        if value.endswith("Z"):
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def format_date(value: date) -> str:
    """Format a native date/time in the canonical YYYY-MM-DD HH:MM:SS form."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return value.strftime(CANONICAL_DATE_FORMAT)


def validate_date(value: Union[str, date, None], field: str = "date") -> str:
    """Validate a date filter value.

    Native date/time values are always valid. Strings must either start
    with a YYYY-MM-DD prefix and parse as a calendar date-time, or be a
    positive integer epoch timestamp within the signed 64-bit range.

    Args:
        value: Date string, epoch seconds string, or datetime
        field: Parameter name reported on failure

    Returns:
        The canonical form for native values, the validated string otherwise

    Raises:
        InvalidArgumentError: If the value is missing or malformed
    """
    if isinstance(value, date):
        return format_date(value)

    if value is None or value == "":
        raise InvalidArgumentError("missing_value", field, "Date string is null or empty")

    if not isinstance(value, str):
        raise InvalidArgumentError("invalid_date", field)

    if _DATE_PREFIX.match(value):
        if not value.isascii() or _parse_calendar_date(value) is None:
            raise InvalidArgumentError("invalid_date", field)
        return value

    stripped = value.strip()
    if not _TIMESTAMP.match(stripped):
        raise InvalidArgumentError("invalid_date", field)

    timestamp = int(stripped)
    if timestamp <= 0 or timestamp > MAX_TIMESTAMP:
        raise InvalidArgumentError("invalid_date", field)

    return value


def validate_non_negative(value: Union[int, float], field: str) -> Union[int, float]:
    """Validate a numeric range endpoint, count or numeric identifier.

    Args:
        value: The number to validate
        field: Parameter name reported on failure

    Returns:
        The value unchanged
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError("invalid_number", field)

    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidArgumentError("invalid_number", field)

    # Must stay representable once totals are converted to float
    try:
        float(value)
    except OverflowError:
        raise InvalidArgumentError("invalid_number", field) from None

    if value < 0:
        raise InvalidArgumentError("negative_number", field)

    return value


def validate_text(value: Optional[str], field: str) -> str:
    """Validate a required free-text value; returned without transformation."""
    if is_null_or_empty(value):
        raise InvalidArgumentError("missing_value", field)

    if not isinstance(value, str):
        raise InvalidArgumentError("missing_value", field, "Value is not a string")

    return value


def validate_custom_param(key: str, value: Any) -> tuple[str, Any]:
    """Validate a custom key/value query parameter.

    Args:
        key: Parameter name, must be non-blank
        value: Parameter value, must not be None

    Returns:
        Tuple of (key, value)
    """
    if not isinstance(key, str) or is_null_or_empty(key):
        raise InvalidArgumentError("missing_value", "key")

    if value is None:
        raise InvalidArgumentError("missing_value", "value")

    return key, value


def validate_new_legacy_statuses(query: Mapping[str, Any], *statuses: Optional[str]) -> None:
    """Guard a bulk status update against unscoped queries.

    Args:
        query: Current query parameters
        *statuses: Candidate new status strings

    Raises:
        InvalidArgumentError: If the query has no filter besides paging, or
            every candidate status is null or empty
    """
    filters = [key for key in query if key not in PAGING_KEYS]
    if not filters:
        raise InvalidArgumentError("empty_query", "query")

    if are_null_or_empty(*statuses):
        raise InvalidArgumentError("missing_value", "statuses", "All new statuses are null or empty")
