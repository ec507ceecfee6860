"""Page fetch adapters returning ``Page | FetchFailure``."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping

from ..core.errors import ListClientClosedError
from ..core.models import FetchFailure, Page
from ..core.pagination import parse_page

logger = logging.getLogger("infinite_selection")

FetchResult = Page | FetchFailure


def _to_failure(cursor: str, exc: Exception) -> FetchFailure:
    failure = FetchFailure.from_exception(exc)
    logger.warning(
        "page fetch failed cursor=%s error=%s cause=%s",
        cursor,
        failure.error_type,
        failure.cause,
    )
    return failure


class PageFetcher:
    """Fetches one page through a sync ``request(url)`` callable."""

    def __init__(self, request: Callable[[str], Mapping[str, object]]) -> None:
        self._request = request

    def fetch_page(self, cursor: str) -> FetchResult:
        try:
            return parse_page(self._request(cursor))
        except ListClientClosedError:
            raise
        except Exception as exc:
            return _to_failure(cursor, exc)


class AsyncPageFetcher:
    """Fetches one page through an async ``request(url)`` callable."""

    def __init__(self, request: Callable[[str], Awaitable[Mapping[str, object]]]) -> None:
        self._request = request

    async def fetch_page(self, cursor: str) -> FetchResult:
        try:
            return parse_page(await self._request(cursor))
        except ListClientClosedError:
            raise
        except Exception as exc:
            return _to_failure(cursor, exc)


__all__ = [
    "FetchResult",
    "PageFetcher",
    "AsyncPageFetcher",
]
