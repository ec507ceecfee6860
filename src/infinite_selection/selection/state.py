"""Explicit per-session list state."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import InfiniteListConfig
from .controller import SelectionController
from .gate import ScrollGate
from .models import ListSnapshot, StatusFlags
from .projection import SelectionProjection
from .store import ItemStore


@dataclass(slots=True)
class ListState:
    gate: ScrollGate
    store: ItemStore = field(default_factory=ItemStore)
    projection: SelectionProjection = field(default_factory=SelectionProjection)
    allow_unknown_names: bool = False
    controller: SelectionController = field(init=False)

    def __post_init__(self) -> None:
        self.controller = SelectionController(
            self.store,
            self.projection,
            allow_unknown_names=self.allow_unknown_names,
        )

    @classmethod
    def from_config(
        cls,
        config: InfiniteListConfig,
        *,
        initial_cursor: str | None = None,
    ) -> "ListState":
        cursor = initial_cursor if initial_cursor is not None else config.initial_cursor()
        return cls(
            gate=ScrollGate(cursor, min_content_height=config.pagination.min_content_height),
            allow_unknown_names=config.selection.allow_unknown_names,
        )

    def status(self) -> StatusFlags:
        return StatusFlags(
            loading=self.gate.loading,
            errored=self.gate.errored,
            exhausted=self.gate.exhausted,
        )

    def snapshot(self) -> ListSnapshot:
        return ListSnapshot(
            catalog=self.store.catalog_view(),
            selection=self.projection.entries(),
            status=self.status(),
            last_failure=self.gate.last_failure,
        )

    def is_consistent(self) -> bool:
        return self.store.selected_names() == frozenset(self.projection.names)


__all__ = [
    "ListState",
]
