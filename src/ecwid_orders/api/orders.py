"""Orders API client for Ecwid."""

import logging
from typing import Any, Optional

from ..constants import (
    API_PATHS,
    LEGACY_FULFILLMENT_STATUSES,
    LEGACY_PAYMENT_STATUSES,
    NEW_STATUS_PARAMS,
)
from ..query import OrdersQueryBuilder
from ..utils.validators import is_null_or_empty, validate_single_status
from .base import BaseAPIClient

logger = logging.getLogger(__name__)


class OrdersAPIClient(BaseAPIClient):
    """Client for Ecwid order search and legacy bulk status updates."""

    def get_api_path(self) -> str:
        """Return the base API path for Orders endpoints."""
        return API_PATHS["orders"]

    def query(self, legacy: bool = False) -> OrdersQueryBuilder:
        """Start a new orders query."""
        return OrdersQueryBuilder(legacy=legacy)

    def search_orders(self, query: OrdersQueryBuilder) -> dict[str, Any]:
        """
        Search orders matching the query filters.

        Args:
            query: Builder holding the validated filter parameters

        Returns:
            Dict containing the search result page

        Raises:
            RateLimitError: When rate limits are exceeded
            EcwidAPIError: For other API errors
        """
        params = query.snapshot()

        try:
            response = self._make_request("GET", API_PATHS["orders"], params=params)
        except Exception:
            logger.exception("Error searching orders")
            raise

        return self._format_success_response(
            response,
            metadata={
                "filters": dict(params),
                "orders_retrieved": response.get("count", len(response.get("items", []))),
                "total": response.get("total"),
            },
        )

    def update_legacy_statuses(
        self,
        query: OrdersQueryBuilder,
        new_fulfillment_status: Optional[str] = None,
        new_payment_status: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Change the status of every order matching the query (legacy API).

        The query must narrow the matched orders with at least one filter
        besides limit/offset, and at least one new status must be given.

        Args:
            query: Builder holding the filter parameters
            new_fulfillment_status: New fulfillment status for matched orders
            new_payment_status: New payment status for matched orders

        Returns:
            Dict containing the update result

        Raises:
            InvalidArgumentError: When the query is unscoped or statuses are invalid
            RateLimitError: When rate limits are exceeded
            EcwidAPIError: For other API errors
        """
        query.validate_new_statuses(new_fulfillment_status, new_payment_status)

        params = dict(query.snapshot())
        if not is_null_or_empty(new_fulfillment_status):
            params[NEW_STATUS_PARAMS["fulfillment"]] = validate_single_status(
                new_fulfillment_status, LEGACY_FULFILLMENT_STATUSES, NEW_STATUS_PARAMS["fulfillment"]
            )
        if not is_null_or_empty(new_payment_status):
            params[NEW_STATUS_PARAMS["payment"]] = validate_single_status(
                new_payment_status, LEGACY_PAYMENT_STATUSES, NEW_STATUS_PARAMS["payment"]
            )

        logger.info(f"Updating statuses of orders matching {sorted(query.snapshot())}")

        try:
            response = self._make_request(
                "PUT",
                API_PATHS["legacy_orders"],
                params=params,
                base_url=self.settings.legacy_store_url,
            )
        except Exception:
            logger.exception("Error updating order statuses")
            raise

        return self._format_success_response(
            response,
            metadata={"updated": {k: v for k, v in params.items() if k in NEW_STATUS_PARAMS.values()}},
        )
