"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import InfiniteListConfig
from .core.errors import ListValidationError
from .selection.state import ListState


def validate_client_config(config: InfiniteListConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ListValidationError(str(exc)) from exc


def resolve_start_cursor(config: InfiniteListConfig, start_cursor: str | None) -> str:
    if start_cursor is None:
        return config.initial_cursor()
    if not start_cursor.strip():
        raise ListValidationError("start_cursor must not be blank")
    return start_cursor


def build_session_state(
    config: InfiniteListConfig,
    *,
    start_cursor: str | None,
) -> ListState:
    return ListState.from_config(
        config,
        initial_cursor=resolve_start_cursor(config, start_cursor),
    )


__all__ = [
    "validate_client_config",
    "resolve_start_cursor",
    "build_session_state",
]
