"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import AsyncIterator
from types import TracebackType

from .client_shared import build_session_state, resolve_start_cursor, validate_client_config
from .config import InfiniteListConfig
from .core.async_pagination import aiterate_pages
from .core.async_transport import AsyncTransport
from .core.errors import ListClientClosedError
from .core.models import FetchFailure, Page
from .core.pagination import parse_page
from .selection.async_session import AsyncSelectionSession
from .selection.fetcher import AsyncPageFetcher


class AsyncInfiniteListClient:
    """Public async infinite list client."""

    def __init__(
        self,
        *,
        config: InfiniteListConfig | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = config or InfiniteListConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._fetcher = AsyncPageFetcher(self._guarded_request)
        self._closed = False

    @property
    def config(self) -> InfiniteListConfig:
        return self._config

    def _ensure_open(self) -> None:
        if self._closed:
            raise ListClientClosedError("AsyncInfiniteListClient is already closed")

    async def _guarded_request(self, url: str) -> dict[str, object]:
        self._ensure_open()
        return await self._transport.request(url)

    async def fetch_page(self, cursor: str | None = None) -> Page:
        payload = await self._guarded_request(resolve_start_cursor(self._config, cursor))
        return parse_page(payload)

    async def try_fetch_page(self, cursor: str | None = None) -> Page | FetchFailure:
        self._ensure_open()
        return await self._fetcher.fetch_page(resolve_start_cursor(self._config, cursor))

    def iter_pages(self, start_cursor: str | None = None) -> AsyncIterator[Page]:
        self._ensure_open()
        return self._iter_pages_guarded(resolve_start_cursor(self._config, start_cursor))

    async def _iter_pages_guarded(self, start_cursor: str) -> AsyncIterator[Page]:
        iterator = aiterate_pages(
            self.fetch_page,
            start_cursor=start_cursor,
            max_pages=self._config.pagination.max_pages,
        ).__aiter__()
        try:
            while True:
                self._ensure_open()
                try:
                    page = await anext(iterator)
                except StopAsyncIteration:
                    return
                yield page
        finally:
            await iterator.aclose()

    def open_session(self, *, start_cursor: str | None = None) -> AsyncSelectionSession:
        self._ensure_open()
        state = build_session_state(self._config, start_cursor=start_cursor)
        return AsyncSelectionSession(self._fetcher, state)

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncInfiniteListClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncInfiniteListClient",
]
