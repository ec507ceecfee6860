"""Async selection session."""

from __future__ import annotations

from types import TracebackType
from typing import Protocol

from ..core.errors import ListClientClosedError
from ..core.models import FetchFailure, Page
from .models import ListSnapshot, ScrollSample, StatusFlags
from .session_shared import apply_fetch_result
from .state import ListState


class AsyncPageSource(Protocol):
    async def fetch_page(self, cursor: str) -> Page | FetchFailure: ...


class AsyncSelectionSession:
    """Async twin of ``SelectionSession``.

    The gate enters ``fetching`` before the fetch is awaited, so triggers
    arriving during the await are dropped. Selection commands stay sync and
    apply immediately; the pending merge recomputes flags from the projection.
    """

    def __init__(self, fetcher: AsyncPageSource, state: ListState) -> None:
        self._fetcher = fetcher
        self._state = state
        self._closed = False

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def status(self) -> StatusFlags:
        return self._state.status()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ListClientClosedError("AsyncSelectionSession is already closed")

    async def start(self) -> bool:
        self._ensure_open()
        if self._state.store.names:
            return False
        return await self.advance()

    async def advance(self) -> bool:
        self._ensure_open()
        gate = self._state.gate
        if not gate.can_advance():
            return False
        cursor = gate.begin()
        try:
            result = await self._fetcher.fetch_page(cursor)
        except Exception as exc:
            gate.fail(FetchFailure.from_exception(exc))
            raise
        return apply_fetch_result(self._state, cursor, result)

    async def on_scroll(self, sample: ScrollSample) -> bool:
        self._ensure_open()
        if not self._state.gate.should_fetch(sample):
            return False
        return await self.advance()

    def select(self, name: str) -> bool:
        self._ensure_open()
        return self._state.controller.select(name)

    def deselect(self, name: str) -> bool:
        self._ensure_open()
        return self._state.controller.deselect(name)

    def toggle(self, name: str) -> bool:
        self._ensure_open()
        return self._state.controller.toggle(name)

    def remove(self, name: str) -> bool:
        self._ensure_open()
        return self._state.controller.remove(name)

    def snapshot(self) -> ListSnapshot:
        return self._state.snapshot()

    async def close(self) -> None:
        self._closed = True

    async def __aenter__(self) -> "AsyncSelectionSession":
        await self.start()
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
    "AsyncPageSource",
    "AsyncSelectionSession",
]
