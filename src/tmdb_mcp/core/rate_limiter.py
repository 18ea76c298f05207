"""Minimum-spacing rate limiter for outbound TMDB requests.

The limiter owns its "last call" timestamp instead of relying on module
state. Concurrent callers queue on an `asyncio.Lock`, so every pair of
outbound calls is spaced by at least `min_interval` seconds.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)


class RateLimiter:
    """Enforces a minimum interval between successive `acquire()` calls.

    `clock` and `sleep` are injectable so tests can drive time explicitly.
    """

    def __init__(
        self,
        min_interval: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self._min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._last_call: float | None = None

    @property
    def min_interval(self) -> float:
        return self._min_interval

    @property
    def last_call(self) -> float | None:
        """Clock reading of the most recent granted call (None before the first one)."""

        return self._last_call

    async def acquire(self) -> float:
        """Wait until a call is allowed, record it, and return its timestamp."""

        async with self._lock:
            now = self._clock()
            if self._last_call is not None:
                wait = self._min_interval - (now - self._last_call)
                if wait > 0:
                    logger.debug("Rate limit: waiting %.3fs", wait)
                    await self._sleep(wait)
                    now = self._clock()
                # A clock that steps backwards must not move the timestamp back.
                now = max(now, self._last_call)
            self._last_call = now
            return now
