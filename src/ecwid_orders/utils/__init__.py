"""Utility modules for Ecwid API operations."""

from .rate_limiter import RateLimiter
from .validators import (
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

__all__ = [
    "RateLimiter",
    "ValidationOutcome",
    "are_null_or_empty",
    "check",
    "is_null_or_empty",
    "validate_custom_param",
    "validate_date",
    "validate_new_legacy_statuses",
    "validate_non_negative",
    "validate_single_status",
    "validate_statuses",
    "validate_text",
]
