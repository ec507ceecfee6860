"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Iterator
from types import TracebackType

from .client_shared import build_session_state, resolve_start_cursor, validate_client_config
from .config import InfiniteListConfig
from .core.errors import ListClientClosedError
from .core.models import FetchFailure, Page
from .core.pagination import iterate_pages, parse_page
from .core.transport import SyncTransport
from .selection.fetcher import PageFetcher
from .selection.session import SelectionSession


class InfiniteListClient:
    """Public infinite list client.

    Owns the transport. Sessions opened from it share the transport and stop
    fetching once the client is closed.
    """

    def __init__(
        self,
        *,
        config: InfiniteListConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = config or InfiniteListConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._fetcher = PageFetcher(self._guarded_request)
        self._closed = False

    @property
    def config(self) -> InfiniteListConfig:
        return self._config

    def _ensure_open(self) -> None:
        if self._closed:
            raise ListClientClosedError("InfiniteListClient is already closed")

    def _guarded_request(self, url: str) -> dict[str, object]:
        self._ensure_open()
        return self._transport.request(url)

    def fetch_page(self, cursor: str | None = None) -> Page:
        """Fetch one page, raising ``ListApiError`` subclasses on failure."""

        return parse_page(self._guarded_request(resolve_start_cursor(self._config, cursor)))

    def try_fetch_page(self, cursor: str | None = None) -> Page | FetchFailure:
        self._ensure_open()
        return self._fetcher.fetch_page(resolve_start_cursor(self._config, cursor))

    def iter_pages(self, start_cursor: str | None = None) -> Iterator[Page]:
        start = resolve_start_cursor(self._config, start_cursor)
        iterator = iterate_pages(
            self.fetch_page,
            start_cursor=start,
            max_pages=self._config.pagination.max_pages,
        )
        while True:
            self._ensure_open()
            try:
                page = next(iterator)
            except StopIteration:
                return
            yield page

    def open_session(self, *, start_cursor: str | None = None) -> SelectionSession:
        self._ensure_open()
        state = build_session_state(self._config, start_cursor=start_cursor)
        return SelectionSession(self._fetcher, state)

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "InfiniteListClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "InfiniteListClient",
]
