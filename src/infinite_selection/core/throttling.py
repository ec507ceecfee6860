"""Minimum-interval throttling between outbound page requests."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable


class _IntervalTracker:
    def __init__(
        self,
        min_interval_seconds: float,
        clock: Callable[[], float] | None,
    ) -> None:
        self._min_interval_seconds = max(0.0, float(min_interval_seconds))
        self._clock = clock or time.monotonic
        self._last_request_at: float | None = None

    def _remaining(self) -> float:
        if self._last_request_at is None:
            return 0.0
        return self._min_interval_seconds - (self._clock() - self._last_request_at)

    def _mark(self) -> None:
        self._last_request_at = self._clock()

    def reset(self) -> None:
        self._last_request_at = None


class MinIntervalThrottler(_IntervalTracker):
    """Blocks until ``min_interval_seconds`` passed since the last request."""

    def __init__(
        self,
        min_interval_seconds: float,
        *,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        super().__init__(min_interval_seconds, clock)
        self._sleep = sleeper or time.sleep

    def wait(self) -> None:
        remaining = self._remaining()
        if remaining > 0:
            self._sleep(remaining)
        self._mark()


class AsyncMinIntervalThrottler(_IntervalTracker):
    """Awaitable twin of :class:`MinIntervalThrottler`."""

    def __init__(
        self,
        min_interval_seconds: float,
        *,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        super().__init__(min_interval_seconds, clock)
        self._sleep = sleeper or asyncio.sleep

    async def wait(self) -> None:
        remaining = self._remaining()
        if remaining > 0:
            await self._sleep(remaining)
        self._mark()


__all__ = [
    "MinIntervalThrottler",
    "AsyncMinIntervalThrottler",
]
