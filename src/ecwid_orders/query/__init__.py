"""Order query construction."""

from .builder import OrdersQueryBuilder

__all__ = ["OrdersQueryBuilder"]
