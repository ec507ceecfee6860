"""Retry helpers."""

from __future__ import annotations

import random

from .errors import ListApiError, ListTransportError

TRANSIENT_CAUSES = frozenset({"network", "server_transient"})


def is_retryable_error(error: ListApiError) -> bool:
    if isinstance(error, ListTransportError):
        return True
    return error.cause in TRANSIENT_CAUSES


def next_backoff_seconds(
    *,
    attempt_index: int,
    max_backoff_seconds: float,
    base_seconds: float = 0.5,
    rng: random.Random | None = None,
) -> float:
    """Exponential backoff capped at ``max_backoff_seconds``, +/-10% jitter.

    attempt_index: 0-based retry index.
    """

    delay = min(max_backoff_seconds, base_seconds * float(2**attempt_index))
    if delay <= 0:
        return 0.0
    source = rng or random
    jitter = delay * 0.1 * (source.random() * 2.0 - 1.0)
    return max(0.0, delay + jitter)


def can_retry(
    *,
    attempt: int,
    max_attempts: int,
    started_at: float,
    now: float,
    total_budget_seconds: float,
) -> bool:
    if attempt >= max_attempts:
        return False
    return (now - started_at) <= total_budget_seconds


__all__ = [
    "TRANSIENT_CAUSES",
    "is_retryable_error",
    "next_backoff_seconds",
    "can_retry",
]
