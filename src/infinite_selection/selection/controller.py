"""Select/deselect commands keeping the store and projection in step."""

from __future__ import annotations

import logging

from .projection import SelectionProjection
from .store import ItemStore

logger = logging.getLogger("infinite_selection")


class SelectionController:
    """Every mutation touches the store flag and the projection together."""

    def __init__(
        self,
        store: ItemStore,
        projection: SelectionProjection,
        *,
        allow_unknown_names: bool = False,
    ) -> None:
        self._store = store
        self._projection = projection
        self._allow_unknown_names = allow_unknown_names

    def select(self, name: str) -> bool:
        item = self._store.get(name)
        if item is None:
            if not self._allow_unknown_names:
                logger.debug("select ignored for unknown name=%s", name)
                return False
            item = self._store.ensure(name)
        if item.selected:
            return False

        item = self._store.set_selected(name, True)
        self._projection.add(item.name, item.url)
        logger.debug("selected name=%s selection_size=%s", name, len(self._projection))
        return True

    def deselect(self, name: str) -> bool:
        if name not in self._projection:
            return False
        if name in self._store:
            self._store.set_selected(name, False)
        self._projection.remove(name)
        logger.debug("deselected name=%s selection_size=%s", name, len(self._projection))
        return True

    def toggle(self, name: str) -> bool:
        if self._store.is_selected(name):
            return self.deselect(name)
        return self.select(name)

    def remove(self, name: str) -> bool:
        """Deselect from the selection view's own remove control."""

        return self.deselect(name)


__all__ = [
    "SelectionController",
]
