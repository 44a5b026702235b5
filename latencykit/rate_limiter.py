"""A token-bucket rate limiter."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


class TokenBucket:
    """Refills at ``rate_per_sec`` up to ``burst_size``; each request takes one token.

    The bucket starts full. ``clock`` returns seconds and defaults to
    :func:`time.monotonic`.
    """

    def __init__(
        self,
        rate_per_sec: float,
        burst_size: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._rate = rate_per_sec
        self._capacity = burst_size
        self._tokens = burst_size
        self._clock = clock
        self._last_refill = clock()
        self._lock = threading.Lock()

    @property
    def tokens(self) -> float:
        """Tokens currently in the bucket, as of the last refill."""
        return self._tokens

    def try_consume(self) -> bool:
        """Refill, then take one token if available; report whether it was taken."""
        with self._lock:
            self._refill()
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return True
            return False

    def refill(self) -> None:
        """Add the tokens earned since the last refill, capped at the burst size."""
        with self._lock:
            self._refill()

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._last_refill
        self._tokens = min(self._capacity, self._tokens + elapsed * self._rate)
        self._last_refill = now