"""Validated query construction for the Ecwid orders API."""

from .api import OrdersAPIClient
from .config import EcwidSettings
from .exceptions import EcwidAPIError, InvalidArgumentError, RateLimitError
from .query import OrdersQueryBuilder

__version__ = "1.0.0"
__all__ = [
    "EcwidAPIError",
    "EcwidSettings",
    "InvalidArgumentError",
    "OrdersAPIClient",
    "OrdersQueryBuilder",
    "RateLimitError",
]
