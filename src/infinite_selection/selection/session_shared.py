"""Shared page-outcome handling for sync/async sessions."""

from __future__ import annotations

import logging

from ..core.models import FetchFailure, Page
from .state import ListState

logger = logging.getLogger("infinite_selection")


def apply_fetch_result(state: ListState, cursor: str, result: Page | FetchFailure) -> bool:
    """Fold one fetch outcome into ``state``; True when a page was merged."""

    if isinstance(result, FetchFailure):
        state.gate.fail(result)
        return False

    appended = state.store.merge_page(result.records, state.projection)
    state.projection.refresh_urls(result.records)
    state.gate.succeed(result.next_cursor)
    logger.info(
        "page merged cursor=%s records=%s appended=%s catalog_size=%s exhausted=%s",
        cursor,
        len(result.records),
        len(appended),
        len(state.store.names),
        state.gate.exhausted,
    )
    return True


__all__ = [
    "apply_fetch_result",
]
