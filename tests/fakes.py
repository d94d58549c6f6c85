"""Test doubles and builders shared across the test suite.

The in-memory repository is already side-effect free, so most tests use
it directly; the fakes here exist to provoke failure paths.
"""

from __future__ import annotations

from stockroom.domain.model.attribute import Attribute
from stockroom.domain.model.item import Item
from stockroom.domain.model.value_objects import Money
from stockroom.infrastructure.bootstrap import bootstrap_catalog
from stockroom.infrastructure.persistence.in_memory_item_repository import (
    InMemoryItemRepository,
)

LETTUCE = "A12T-4GH7-QPL9-3N4M"
PEACH = "E5T6-9UI3-TH15-QR88"
PEPPER = "YRT6-72AS-K736-L4AR"
APPLE = "TQ4C-VV6T-75ZX-1RMR"


class StaleItemRepository(InMemoryItemRepository):
    """Finds items but never manages to write them back."""

    def update(self, item: Item) -> bool:
        return False


def make_item(
    code: str,
    name: str,
    price: str = "1.00",
    quantity: int = 0,
    attributes: tuple[Attribute, ...] = (),
) -> Item:
    return Item(
        code=code,
        name=name,
        price=Money.of(price),
        quantity=quantity,
        attributes=frozenset(attributes),
    )


def seeded_repo() -> InMemoryItemRepository:
    return InMemoryItemRepository(bootstrap_catalog())


def codes(items) -> list[str]:
    return [item.code for item in items]
