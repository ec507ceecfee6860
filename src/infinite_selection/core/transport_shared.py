"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping

import httpx

from ..config import InfiniteListConfig
from .errors import ListApiError
from .response_parsing import classify_response_outcome, parse_json_payload
from .retry import can_retry, next_backoff_seconds

logger = logging.getLogger("infinite_selection")


def build_default_headers(config: InfiniteListConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: InfiniteListConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def should_retry_attempt(
    *,
    config: InfiniteListConfig,
    attempt: int,
    started_at: float,
    now: float,
) -> bool:
    return can_retry(
        attempt=attempt,
        max_attempts=config.retry.max_attempts,
        started_at=started_at,
        now=now,
        total_budget_seconds=config.retry.total_retry_budget_seconds,
    )


def compute_backoff_seconds(
    *,
    config: InfiniteListConfig,
    attempt: int,
    rng: random.Random,
) -> float:
    return next_backoff_seconds(
        attempt_index=attempt - 1,
        max_backoff_seconds=config.retry.max_backoff_seconds,
        rng=rng,
    )


def evaluate_response(
    response: object,
    *,
    url: str,
    attempt: int,
) -> tuple[dict[str, object] | None, ListApiError | None]:
    """Return ``(payload, None)`` on success or ``(None, error)``."""

    http_status = getattr(response, "status_code", None)
    logger.debug(
        "response received url=%s attempt=%s http_status=%s",
        url,
        attempt,
        http_status,
    )
    mapped_error = classify_response_outcome(http_status=http_status)
    try:
        payload = parse_json_payload(response, http_status=http_status)  # type: ignore[arg-type]
    except ListApiError as exc:
        logger.error(
            "response parse error url=%s attempt=%s http_status=%s",
            url,
            attempt,
            http_status,
        )
        return None, mapped_error or exc
    if mapped_error is not None:
        return None, mapped_error
    return payload, None


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "should_retry_attempt",
    "compute_backoff_seconds",
    "evaluate_response",
]
