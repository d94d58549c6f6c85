"""Abstract repository for the Item aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The repository owns the ordered item sequence:
implementations store and hand out copies, so nothing outside the
repository can splice or mutate the stored records directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockroom.domain.model.item import Item


class ItemRepository(ABC):

    @abstractmethod
    def get_by_code(self, code: str) -> Item | None:
        """Return the item with this code (case-insensitive), or None."""

    @abstractmethod
    def get_by_name(self, name: str) -> Item | None:
        """Return the first item with this name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every item in insertion order."""

    @abstractmethod
    def add(self, item: Item) -> None:
        """Append a new item to the end of the sequence."""

    @abstractmethod
    def update(self, item: Item) -> bool:
        """Overwrite the stored item with the same code in place.

        Returns False if no stored item has that code.
        """

    @abstractmethod
    def remove(self, code: str) -> bool:
        """Remove the first item with this code, closing the gap.

        Returns False if no stored item has that code.
        """
