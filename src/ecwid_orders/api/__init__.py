"""Ecwid API client modules."""

from .base import BaseAPIClient
from .orders import OrdersAPIClient

__all__ = ["BaseAPIClient", "OrdersAPIClient"]
