"""
Token bucket rate limiter for outbound provider calls.

With ``capacity=1`` the bucket admits one call immediately and then one call
every ``1 / rate_per_second`` seconds, which is the fixed cadence the Apollo
enrichment loop needs. The clock and sleep functions are injectable so the
cadence can be checked without real waiting.

Usage:
    limiter = TokenBucket.from_interval(1.2)
    for profile in profiles:
        limiter.acquire()  # blocks until the next slot
        enrich(profile)
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class RateLimitStats:
    total_requests: int = 0
    waits_count: int = 0
    total_wait_time_seconds: float = 0.0


class TokenBucket:
    def __init__(
        self,
        rate_per_second: Optional[float],
        capacity: int = 1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Args:
            rate_per_second: Token refill rate. ``None`` or ``0`` disables limiting.
            capacity: Maximum burst size.
            clock: Monotonic time source.
            sleep: Blocking sleep used while waiting for a token.
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.rate_per_second = rate_per_second or 0.0
        self.capacity = capacity
        self._clock = clock
        self._sleep = sleep
        self._tokens = float(capacity)
        self._last_refill = clock()
        self._lock = threading.Lock()
        self.stats = RateLimitStats()

    @classmethod
    def from_interval(cls, interval_seconds: float, **kwargs) -> "TokenBucket":
        rate = 1.0 / interval_seconds if interval_seconds and interval_seconds > 0 else 0.0
        return cls(rate, capacity=1, **kwargs)

    @property
    def enabled(self) -> bool:
        return self.rate_per_second > 0

    def _refill(self) -> None:
        now = self._clock()
        elapsed = max(0.0, now - self._last_refill)
        self._tokens = min(float(self.capacity), self._tokens + elapsed * self.rate_per_second)
        self._last_refill = now

    def acquire(self) -> float:
        """Take one token, blocking until it is available. Returns seconds waited."""
        with self._lock:
            self.stats.total_requests += 1
            if not self.enabled:
                return 0.0
            self._refill()
            waited = 0.0
            if self._tokens < 1.0:
                waited = (1.0 - self._tokens) / self.rate_per_second
                self.stats.waits_count += 1
                self.stats.total_wait_time_seconds += waited
                logger.debug("Rate limit wait %.3fs", waited)
                self._sleep(waited)
                self._refill()
                # Sleep may undershoot on a coarse clock; the slot is ours regardless
                self._tokens = max(self._tokens, 1.0)
            self._tokens -= 1.0
            return waited
