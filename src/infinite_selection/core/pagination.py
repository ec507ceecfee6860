"""Pagination helpers based on the ``next`` cursor."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping

from .errors import ListProtocolError
from .models import Page, PageRecord


def _parse_cursor(payload: Mapping[str, object], key: str) -> str | None:
    raw = payload.get(key)
    if raw is None:
        return None
    if isinstance(raw, str):
        text = raw.strip()
        return text or None
    raise ListProtocolError(f"{key} has unsupported type")


def parse_next_cursor(payload: Mapping[str, object]) -> str | None:
    return _parse_cursor(payload, "next")


def parse_records(payload: Mapping[str, object]) -> tuple[PageRecord, ...]:
    raw = payload.get("results")
    if not isinstance(raw, list):
        raise ListProtocolError("results must be a list")

    records: list[PageRecord] = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            raise ListProtocolError("results entries must be objects")
        name = entry.get("name")
        url = entry.get("url")
        if not isinstance(name, str) or name == "":
            raise ListProtocolError("results entry name must be a non-empty string")
        if not isinstance(url, str):
            raise ListProtocolError("results entry url must be a string")
        records.append(PageRecord(name=name, url=url))
    return tuple(records)


def parse_page(payload: Mapping[str, object]) -> Page:
    """Adapt one API payload (``results``/``next``/``previous``/``count``)."""

    count = payload.get("count")
    if count is not None and (isinstance(count, bool) or not isinstance(count, int)):
        raise ListProtocolError("count is not a valid integer")
    return Page(
        records=parse_records(payload),
        next_cursor=parse_next_cursor(payload),
        previous_cursor=_parse_cursor(payload, "previous"),
        count=count,
    )


def iterate_pages(
    fetch_page: Callable[[str], Page],
    *,
    start_cursor: str,
    max_pages: int = 10_000,
) -> Iterator[Page]:
    current = start_cursor
    seen_cursors: set[str] = {start_cursor}

    for _ in range(max_pages):
        page = fetch_page(current)
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
    "parse_next_cursor",
    "parse_records",
    "parse_page",
    "iterate_pages",
]
