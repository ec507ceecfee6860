"""Ordered projection of the selected items."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.models import PageRecord
from .models import SelectedEntry


class SelectionProjection:
    """Selected entries in selection order, indexed by name.

    Backed by an insertion-ordered dict so add, remove and membership are
    O(1) and removal keeps the order of the remaining entries.
    """

    def __init__(self) -> None:
        self._entries: dict[str, SelectedEntry] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SelectedEntry]:
        return iter(self._entries.values())

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def entries(self) -> tuple[SelectedEntry, ...]:
        return tuple(self._entries.values())

    def get(self, name: str) -> SelectedEntry | None:
        return self._entries.get(name)

    def add(self, name: str, url: str) -> bool:
        if name in self._entries:
            return False
        self._entries[name] = SelectedEntry(name=name, url=url)
        return True

    def remove(self, name: str) -> bool:
        return self._entries.pop(name, None) is not None

    def refresh_urls(self, records: Iterable[PageRecord]) -> tuple[str, ...]:
        """Copy fetched urls into selected entries whose url is blank or stale.

        Selection order is untouched. Records with an empty url never
        overwrite a known one. Returns the names that were updated.
        """

        refreshed: list[str] = []
        for record in records:
            entry = self._entries.get(record.name)
            if entry is None or not record.url or entry.url == record.url:
                continue
            self._entries[record.name] = SelectedEntry(name=record.name, url=record.url)
            refreshed.append(record.name)
        return tuple(refreshed)


__all__ = [
    "SelectionProjection",
]
