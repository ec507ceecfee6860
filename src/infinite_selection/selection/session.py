"""Sync selection session: the command surface a renderer drives."""

from __future__ import annotations

from types import TracebackType
from typing import Protocol

from ..core.errors import ListClientClosedError
from ..core.models import FetchFailure, Page
from .models import ListSnapshot, ScrollSample, StatusFlags
from .session_shared import apply_fetch_result
from .state import ListState


class PageSource(Protocol):
    def fetch_page(self, cursor: str) -> Page | FetchFailure: ...


class SelectionSession:
    """Paginated list plus selected subset for one browsing session.

    ``advance()`` is the only way a page gets fetched; ``on_scroll()`` and
    ``start()`` are drivers on top of it.
    """

    def __init__(self, fetcher: PageSource, state: ListState) -> None:
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
            raise ListClientClosedError("SelectionSession is already closed")

    def start(self) -> bool:
        """Initial load: fetch the first page without waiting for a scroll."""

        self._ensure_open()
        if self._state.store.names:
            return False
        return self.advance()

    def advance(self) -> bool:
        self._ensure_open()
        gate = self._state.gate
        if not gate.can_advance():
            return False
        cursor = gate.begin()
        try:
            result = self._fetcher.fetch_page(cursor)
        except Exception as exc:
            gate.fail(FetchFailure.from_exception(exc))
            raise
        return apply_fetch_result(self._state, cursor, result)

    def on_scroll(self, sample: ScrollSample) -> bool:
        self._ensure_open()
        if not self._state.gate.should_fetch(sample):
            return False
        return self.advance()

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

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> "SelectionSession":
        self.start()
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
    "PageSource",
    "SelectionSession",
]
