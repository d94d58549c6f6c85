"""In-process implementation of ItemRepository.

Items live in a single ordered list for the lifetime of the process.
Lookups are linear scans; every read and write goes through a copy so
callers never hold a reference to a stored record.
"""

from __future__ import annotations

from stockroom.domain.model.item import Item
from stockroom.domain.model.product_code import same_key
from stockroom.domain.repository.item_repository import ItemRepository


class InMemoryItemRepository(ItemRepository):

    def __init__(self, items: list[Item] | None = None) -> None:
        self._items: list[Item] = [item.copy() for item in items or []]

    # --- ItemRepository interface ---------------------------------------------

    def get_by_code(self, code: str) -> Item | None:
        index = self._index_of(code)
        if index is None:
            return None
        return self._items[index].copy()

    def get_by_name(self, name: str) -> Item | None:
        for item in self._items:
            if same_key(item.name, name):
                return item.copy()
        return None

    def list_all(self) -> list[Item]:
        return [item.copy() for item in self._items]

    def add(self, item: Item) -> None:
        self._items.append(item.copy())

    def update(self, item: Item) -> bool:
        index = self._index_of(item.code)
        if index is None:
            return False
        self._items[index] = item.copy()
        return True

    def remove(self, code: str) -> bool:
        index = self._index_of(code)
        if index is None:
            return False
        del self._items[index]
        return True

    def __len__(self) -> int:
        return len(self._items)

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, code: str) -> int | None:
        for i, item in enumerate(self._items):
            if same_key(item.code, code):
                return i
        return None
