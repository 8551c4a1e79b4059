"""Common exceptions for the ecwid-orders package."""

from typing import Optional

from .constants import INVALID_ARGUMENT_CATEGORIES


class InvalidArgumentError(ValueError):
    """Raised when a query parameter fails validation."""

    def __init__(self, category: str, field: str, message: Optional[str] = None) -> None:
        if message is None:
            message = INVALID_ARGUMENT_CATEGORIES.get(category, "Invalid argument")
        super().__init__(f"{message}. (Parameter '{field}')")
        self.category = category
        self.field = field


class RateLimitError(Exception):
    """Raised when rate limit is exceeded."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class EcwidAPIError(Exception):
    """Raised when the Ecwid API returns an error."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}
