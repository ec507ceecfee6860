"""Async pagination helpers based on the ``next`` cursor."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable

from .errors import ListProtocolError
from .models import Page


async def aiterate_pages(
    fetch_page: Callable[[str], Awaitable[Page]],
    *,
    start_cursor: str,
    max_pages: int = 10_000,
) -> AsyncIterator[Page]:
    current = start_cursor
    seen_cursors: set[str] = {start_cursor}

    for _ in range(max_pages):
        page = await fetch_page(current)
        yield page

        next_cursor = page.next_cursor
        if next_cursor is None:
            return
        if next_cursor in seen_cursors:
            raise ListProtocolError("next cursor loop detected")
        seen_cursors.add(next_cursor)
        current = next_cursor

    raise ListProtocolError("Exceeded pagination guardrail (max_pages)")


__all__ = [
    "aiterate_pages",
]
