"""Simple in-memory rate limiter for the AI advisor endpoints."""

import time
from collections import defaultdict
from typing import Dict, Tuple

from fastapi import HTTPException

from college_planner.core.config import get_settings
from college_planner.core.logging import get_logger

logger = get_logger(__name__)


class RateLimiter:
    """
    Token bucket rate limiter.

    Tracks requests per key (e.g., user id) in process memory.
    """

    def __init__(self, requests_per_minute: int = 6, burst_size: int = 10):
        """
        Initialize rate limiter.

        Args:
            requests_per_minute: Sustained rate limit
            burst_size: Maximum burst size
        """
        self.requests_per_minute = requests_per_minute
        self.burst_size = burst_size
        self.refill_rate = requests_per_minute / 60.0  # tokens per second

        # key -> (tokens, last_refill_time)
        self._buckets: Dict[str, Tuple[float, float]] = defaultdict(
            lambda: (float(burst_size), time.time())
        )

    def _refill_bucket(self, key: str) -> None:
        current_tokens, last_refill = self._buckets[key]
        now = time.time()
        tokens_to_add = (now - last_refill) * self.refill_rate
        self._buckets[key] = (min(self.burst_size, current_tokens + tokens_to_add), now)

    def check_limit(self, key: str, cost: float = 1.0) -> bool:
        """
        Consume tokens for a request.

        Args:
            key: Rate limit key
            cost: Token cost for this request (default 1.0)

        Returns:
            True if allowed

        Raises:
            HTTPException: 429 if rate limited
        """
        self._refill_bucket(key)
        current_tokens, last_refill = self._buckets[key]

        if current_tokens >= cost:
            self._buckets[key] = (current_tokens - cost, last_refill)
            return True

        retry_after = int((cost - current_tokens) / self.refill_rate) + 1
        logger.warning(
            f"Rate limit exceeded for key: {key}, "
            f"tokens: {current_tokens:.2f}/{self.burst_size}, "
            f"retry after: {retry_after}s"
        )
        raise HTTPException(
            status_code=429,
            detail=f"Rate limit exceeded. Try again in {retry_after} seconds.",
            headers={"Retry-After": str(retry_after)},
        )


_advisor_rate_limiter: RateLimiter | None = None


def get_advisor_rate_limiter() -> RateLimiter:
    """Process-wide advisor limiter, sized from settings on first use."""
    global _advisor_rate_limiter
    if _advisor_rate_limiter is None:
        settings = get_settings()
        _advisor_rate_limiter = RateLimiter(
            requests_per_minute=settings.ADVISOR_REQUESTS_PER_MINUTE,
            burst_size=settings.ADVISOR_BURST_SIZE,
        )
    return _advisor_rate_limiter


def check_advisor_rate_limit(user_id: str) -> None:
    """
    Check rate limit for AI advisor calls.

    Raises:
        HTTPException: 429 if rate limited
    """
    get_advisor_rate_limiter().check_limit(f"advisor:{user_id}")
