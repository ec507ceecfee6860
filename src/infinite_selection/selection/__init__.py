"""Paginated list and selection state package."""

from .models import (
    GateState,
    Item,
    ListSnapshot,
    ScrollSample,
    SelectedEntry,
    StatusFlags,
)

__all__ = [
    "Item",
    "SelectedEntry",
    "ScrollSample",
    "GateState",
    "StatusFlags",
    "ListSnapshot",
]
