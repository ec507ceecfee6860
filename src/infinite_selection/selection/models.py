"""Selection domain and view models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.models import FetchFailure

EMPTY_CATALOG_MESSAGE = "items will be shown here"
ERROR_CATALOG_MESSAGE = "network error: could not fetch items"
EMPTY_SELECTION_MESSAGE = "selected items will be shown here"


@dataclass(slots=True, frozen=True)
class Item:
    name: str
    url: str
    selected: bool = False


@dataclass(slots=True, frozen=True)
class SelectedEntry:
    name: str
    url: str


@dataclass(slots=True, frozen=True)
class ScrollSample:
    """Scroll container geometry at one scroll event.

    ``content_height`` is the rendered list height; when omitted the
    container's ``scroll_height`` stands in for it.
    """

    scroll_top: float
    client_height: float
    scroll_height: float
    content_height: float | None = None

    @property
    def at_bottom(self) -> bool:
        return self.scroll_top + self.client_height == self.scroll_height

    @property
    def rendered_height(self) -> float:
        if self.content_height is None:
            return self.scroll_height
        return self.content_height


class GateState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    EXHAUSTED = "exhausted"
    ERRORED = "errored"


@dataclass(slots=True, frozen=True)
class StatusFlags:
    loading: bool
    errored: bool
    exhausted: bool


@dataclass(slots=True, frozen=True)
class ListSnapshot:
    catalog: tuple[Item, ...] | list[Item]
    selection: tuple[SelectedEntry, ...] | list[SelectedEntry]
    status: StatusFlags
    last_failure: FetchFailure | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.catalog, tuple):
            object.__setattr__(self, "catalog", tuple(self.catalog))
        if not isinstance(self.selection, tuple):
            object.__setattr__(self, "selection", tuple(self.selection))

    @property
    def status_message(self) -> str | None:
        """Placeholder text for an empty primary list."""

        if self.catalog:
            return None
        if self.status.errored:
            return ERROR_CATALOG_MESSAGE
        return EMPTY_CATALOG_MESSAGE

    @property
    def selection_message(self) -> str | None:
        if self.selection:
            return None
        return EMPTY_SELECTION_MESSAGE


__all__ = [
    "EMPTY_CATALOG_MESSAGE",
    "ERROR_CATALOG_MESSAGE",
    "EMPTY_SELECTION_MESSAGE",
    "Item",
    "SelectedEntry",
    "ScrollSample",
    "GateState",
    "StatusFlags",
    "ListSnapshot",
]
