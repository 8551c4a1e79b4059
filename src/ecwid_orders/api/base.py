"""Base API client for Ecwid REST API interactions."""

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Mapping, Optional

import requests

from ..config import EcwidSettings
from ..constants import ERROR_CODES
from ..exceptions import EcwidAPIError, RateLimitError
from ..utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class BaseAPIClient(ABC):
    """Base class for all Ecwid API clients."""

    def __init__(self, settings: EcwidSettings, rate_limiter: Optional[RateLimiter] = None) -> None:
        """Initialize the base API client.

        Args:
            settings: Store id, access token and endpoints
            rate_limiter: Shared limiter; a private one is created if omitted
        """
        self.settings = settings

        self.headers = {
            "Authorization": f"Bearer {settings.token}",
            "user-agent": "EcwidOrders/1.0 (Language=Python)",
            "accept": "application/json",
        }

        self.rate_limiter = rate_limiter or RateLimiter()

    @abstractmethod
    def get_api_path(self) -> str:
        """Return the base API path for this client."""

    def _make_request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[dict[str, Any]] = None,
        base_url: Optional[str] = None,
    ) -> dict[str, Any]:
        """Make an authenticated request with rate limiting and error handling.

        Args:
            method: HTTP method (GET, PUT, etc.)
            path: API path relative to the store URL
            params: Query parameters, read once
            data: Request body data
            base_url: Store URL override (used for the legacy API)

        Returns:
            Dict containing the decoded JSON response

        Raises:
            RateLimitError: When rate limit is exceeded
            EcwidAPIError: For HTTP error responses
        """
        request_id = str(uuid.uuid4())
        start_time = datetime.now()

        logger.info(f"Request {request_id}: Starting {method} {path}")

        self.rate_limiter.wait_if_needed(self.get_api_path())

        url = f"{base_url or self.settings.store_url}{path}"

        try:
            response = requests.request(
                method=method,
                url=url,
                params=dict(params) if params is not None else None,
                json=data,
                headers=self.headers,
                timeout=self.settings.timeout,
            )

            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)

            if response.status_code == 429:
                retry_after = int(response.headers.get("Retry-After", 60))
                logger.warning(f"Request {request_id}: Rate limit exceeded, retry after {retry_after}s")
                raise RateLimitError(ERROR_CODES["rate_limit_exceeded"], retry_after)

            response.raise_for_status()
            result: dict[str, Any] = response.json()

            logger.info(f"Request {request_id}: Success in {duration_ms}ms, status={response.status_code}")

            return result

        except requests.HTTPError as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            status_code = e.response.status_code if e.response is not None else None
            logger.error(f"Request {request_id}: HTTP error in {duration_ms}ms, status={status_code or 'unknown'}")

            if status_code in (401, 403):
                error_code = "auth_failed"
            else:
                error_code = "api_error"

            details = {"status_code": status_code}
            if e.response is not None:
                details["body"] = e.response.text
            raise EcwidAPIError(f"{ERROR_CODES[error_code]}: HTTP {status_code}", error_code, details) from e

    def _format_success_response(self, data: Any, metadata: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Wrap response data with a timestamp and request id."""
        response = {
            "success": True,
            "data": data,
            "metadata": {
                "timestamp": datetime.now().isoformat() + "Z",
                "request_id": str(uuid.uuid4()),
            },
        }

        if metadata:
            response["metadata"].update(metadata)

        return response
