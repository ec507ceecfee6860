"""Async HTTP transport with retry, throttling, and status evaluation."""

from __future__ import annotations

import asyncio
import logging
import random
import time
from collections.abc import Awaitable, Callable
from typing import Protocol

import httpx

from ..config import InfiniteListConfig
from .errors import ListProtocolError, ListTransportError
from .retry import is_retryable_error
from .throttling import AsyncMinIntervalThrottler
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    compute_backoff_seconds,
    evaluate_response,
    should_retry_attempt,
)

logger = logging.getLogger("infinite_selection")


class AsyncTransportClient(Protocol):
    async def get(self, url: str) -> object: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for a cursor-paginated JSON list API."""

    def __init__(
        self,
        config: InfiniteListConfig,
        *,
        client: AsyncTransportClient | None = None,
        sleeper: Callable[[float], Awaitable[None]] | None = None,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config
        self._sleep = sleeper or _default_sleep
        self._clock = clock or time.monotonic
        self._rng = rng or random.Random()
        self._closed = False

        self._throttler = AsyncMinIntervalThrottler(
            config.throttling.min_wait_interval_seconds,
            clock=self._clock,
            sleeper=self._sleep,
        )
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
            follow_redirects=True,
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(self, url: str) -> dict[str, object]:
        if self._closed:
            raise ListTransportError("transport is already closed")

        started_at = self._clock()
        attempt = 0

        while True:
            attempt += 1
            logger.debug("request start url=%s attempt=%s", url, attempt)
            await self._throttler.wait()

            try:
                response = await self._client.get(url)
            except Exception as exc:
                if should_retry_attempt(
                    config=self._config,
                    attempt=attempt,
                    started_at=started_at,
                    now=self._clock(),
                ):
                    logger.warning(
                        "request network error; retrying url=%s attempt=%s error=%s",
                        url,
                        attempt,
                        exc.__class__.__name__,
                    )
                    await self._sleep(
                        compute_backoff_seconds(
                            config=self._config,
                            attempt=attempt,
                            rng=self._rng,
                        )
                    )
                    continue
                logger.error(
                    "request network error; giving up url=%s attempt=%s error=%s",
                    url,
                    attempt,
                    exc.__class__.__name__,
                )
                raise ListTransportError(
                    "network/transport error",
                    cause="network",
                ) from exc

            payload, error = evaluate_response(response, url=url, attempt=attempt)
            if error is None:
                if payload is None:
                    raise ListProtocolError("response carried neither payload nor error")
                logger.info("request success url=%s attempt=%s", url, attempt)
                return payload

            if is_retryable_error(error) and should_retry_attempt(
                config=self._config,
                attempt=attempt,
                started_at=started_at,
                now=self._clock(),
            ):
                logger.warning(
                    "request transient failure; retrying url=%s attempt=%s http_status=%s",
                    url,
                    attempt,
                    error.http_status,
                )
                await self._sleep(
                    compute_backoff_seconds(
                        config=self._config,
                        attempt=attempt,
                        rng=self._rng,
                    )
                )
                continue

            logger.error(
                "request failed url=%s attempt=%s http_status=%s",
                url,
                attempt,
                error.http_status,
            )
            raise error


async def _default_sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


__all__ = [
    "AsyncTransport",
]
