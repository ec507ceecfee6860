"""Fetch-trigger state machine for scroll-driven pagination."""

from __future__ import annotations

import logging

from ..config import DEFAULT_MIN_CONTENT_HEIGHT
from ..core.models import FetchFailure
from .models import GateState, ScrollSample

logger = logging.getLogger("infinite_selection")

_STARTABLE = frozenset({GateState.IDLE, GateState.ERRORED})


class ScrollGate:
    """Owns the next-page cursor and allows at most one fetch in flight.

    ``exhausted`` is terminal. ``errored`` keeps the cursor so the next
    qualifying trigger retries the same page.
    """

    def __init__(
        self,
        initial_cursor: str | None,
        *,
        min_content_height: float = DEFAULT_MIN_CONTENT_HEIGHT,
    ) -> None:
        self._cursor = initial_cursor
        self._min_content_height = min_content_height
        self._state = GateState.IDLE if initial_cursor is not None else GateState.EXHAUSTED
        self._last_failure: FetchFailure | None = None

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def cursor(self) -> str | None:
        return self._cursor

    @property
    def last_failure(self) -> FetchFailure | None:
        return self._last_failure

    @property
    def loading(self) -> bool:
        return self._state is GateState.FETCHING

    @property
    def errored(self) -> bool:
        # Sticky across a retry until a fetch succeeds.
        return self._last_failure is not None

    @property
    def exhausted(self) -> bool:
        return self._state is GateState.EXHAUSTED

    def can_advance(self) -> bool:
        return self._state in _STARTABLE and self._cursor is not None

    def should_fetch(self, sample: ScrollSample) -> bool:
        if not sample.at_bottom:
            return False
        if not self.can_advance():
            return False
        return sample.rendered_height >= self._min_content_height

    def begin(self) -> str:
        cursor = self._cursor
        if cursor is None or self._state not in _STARTABLE:
            raise RuntimeError(f"cannot start a fetch from state {self._state.value}")
        self._transition(GateState.FETCHING)
        return cursor

    def succeed(self, next_cursor: str | None) -> None:
        self._require_fetching()
        self._cursor = next_cursor
        self._last_failure = None
        self._transition(GateState.IDLE if next_cursor is not None else GateState.EXHAUSTED)

    def fail(self, failure: FetchFailure) -> None:
        self._require_fetching()
        self._last_failure = failure
        self._transition(GateState.ERRORED)

    def _require_fetching(self) -> None:
        if self._state is not GateState.FETCHING:
            raise RuntimeError(f"no fetch in flight (state {self._state.value})")

    def _transition(self, new_state: GateState) -> None:
        logger.debug("gate %s -> %s", self._state.value, new_state.value)
        self._state = new_state


__all__ = [
    "ScrollGate",
]
