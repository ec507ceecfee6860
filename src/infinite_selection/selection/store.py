"""Cumulative, order-preserving item registry."""

from __future__ import annotations

from collections.abc import Container, Iterable

from ..core.models import PageRecord
from .models import Item


class ItemStore:
    """All items seen so far, keyed by name, with first-seen catalog order.

    A name may be present in the map without a catalog position when it was
    selected before any page carried it; it gets its position on first fetch.
    """

    def __init__(self) -> None:
        self._items: dict[str, Item] = {}
        self._order: list[str] = []
        self._positions: set[str] = set()

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)

    @property
    def names(self) -> tuple[str, ...]:
        """Catalog order."""

        return tuple(self._order)

    def get(self, name: str) -> Item | None:
        return self._items.get(name)

    def is_selected(self, name: str) -> bool:
        item = self._items.get(name)
        return item is not None and item.selected

    def selected_names(self) -> frozenset[str]:
        return frozenset(name for name, item in self._items.items() if item.selected)

    def catalog_view(self) -> tuple[Item, ...]:
        return tuple(self._items[name] for name in self._order)

    def merge_page(
        self,
        records: Iterable[PageRecord],
        selection: Container[str],
    ) -> tuple[str, ...]:
        """Upsert ``records`` and return the names newly added to catalog order.

        ``selected`` is recomputed from ``selection`` for every record, so a
        re-fetched page never resurrects a stale flag.
        """

        appended: list[str] = []
        for record in records:
            self._items[record.name] = Item(
                name=record.name,
                url=record.url,
                selected=record.name in selection,
            )
            if record.name not in self._positions:
                self._positions.add(record.name)
                self._order.append(record.name)
                appended.append(record.name)
        return tuple(appended)

    def ensure(self, name: str) -> Item:
        """Return the item for ``name``, creating a blank unselected one."""

        item = self._items.get(name)
        if item is None:
            item = Item(name=name, url="", selected=False)
            self._items[name] = item
        return item

    def set_selected(self, name: str, selected: bool) -> Item:
        current = self._items.get(name)
        if current is None:
            raise KeyError(name)
        if current.selected is selected:
            return current
        updated = Item(name=current.name, url=current.url, selected=selected)
        self._items[name] = updated
        return updated


__all__ = [
    "ItemStore",
]
