"""Rate limiting for Ecwid API endpoints."""

import time
from threading import Lock
from typing import Optional

from ..constants import DEFAULT_RATE_LIMITS


class TokenBucket:
    """Token bucket implementation for rate limiting."""

    def __init__(self, capacity: int, refill_rate: float) -> None:
        """Initialize token bucket.

        Args:
            capacity: Maximum number of tokens in the bucket
            refill_rate: Number of tokens added per second
        """
        self.capacity = capacity
        self.refill_rate = refill_rate
        self.tokens = float(capacity)
        self.last_refill = time.monotonic()
        self.lock = Lock()

    def _refill(self) -> None:
        now = time.monotonic()
        self.tokens = min(self.capacity, self.tokens + (now - self.last_refill) * self.refill_rate)
        self.last_refill = now

    def consume(self, tokens: int = 1) -> bool:
        """Try to take tokens from the bucket.

        Returns:
            True if tokens were consumed, False if not enough are available
        """
        with self.lock:
            self._refill()
            if self.tokens >= tokens:
                self.tokens -= tokens
                return True
            return False

    def time_until_available(self, tokens: int = 1) -> float:
        """Seconds until enough tokens are available."""
        with self.lock:
            self._refill()
            if self.tokens >= tokens:
                return 0.0
            return (tokens - self.tokens) / self.refill_rate


class RateLimiter:
    """Per-endpoint rate limiter using the token bucket algorithm."""

    # Conservative fallback (requests per second, burst capacity)
    DEFAULT_LIMIT = (5, 10)

    def __init__(self, limits: Optional[dict[str, tuple[float, int]]] = None) -> None:
        self.limits = dict(DEFAULT_RATE_LIMITS if limits is None else limits)
        self.buckets: dict[str, TokenBucket] = {}
        self.lock = Lock()

    def _get_bucket(self, api_path: str) -> TokenBucket:
        with self.lock:
            if api_path not in self.buckets:
                rate_per_second, burst_capacity = self.limits.get(api_path, self.DEFAULT_LIMIT)
                self.buckets[api_path] = TokenBucket(capacity=burst_capacity, refill_rate=rate_per_second)
            return self.buckets[api_path]

    def wait_if_needed(self, api_path: str, tokens: int = 1) -> float:
        """Block until the request may be sent.

        Args:
            api_path: The API path being accessed
            tokens: Number of tokens to consume

        Returns:
            Seconds spent waiting
        """
        bucket = self._get_bucket(api_path)
        waited = 0.0

        while not bucket.consume(tokens):
            wait_time = bucket.time_until_available(tokens)
            time.sleep(wait_time)
            waited += wait_time

        return waited
