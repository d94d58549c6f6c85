"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from stockroom.domain.model.attribute import Attribute
from stockroom.domain.model.item import Item
from stockroom.domain.model.value_objects import Money
from stockroom.infrastructure.persistence.in_memory_item_repository import (
    InMemoryItemRepository,
)


def bootstrap_catalog() -> list[Item]:
    """The demonstration items every fresh store starts with."""
    return [
        Item(
            code="A12T-4GH7-QPL9-3N4M",
            name="Lettuce",
            price=Money.of("3.46"),
            quantity=25,
            attributes=frozenset({Attribute.ORGANIC, Attribute.LOCALLY_SOURCED}),
        ),
        Item(
            code="E5T6-9UI3-TH15-QR88",
            name="Peach",
            price=Money.of("2.99"),
            quantity=40,
            attributes=frozenset({Attribute.ORGANIC}),
        ),
        Item(
            code="YRT6-72AS-K736-L4AR",
            name="Green Pepper",
            price=Money.of("0.79"),
            quantity=60,
            attributes=frozenset({Attribute.NON_GMO}),
        ),
        Item(
            code="TQ4C-VV6T-75ZX-1RMR",
            name="Gala Apple",
            price=Money.of("3.59"),
            quantity=80,
            attributes=frozenset({Attribute.LOCALLY_SOURCED}),
        ),
    ]


def item_repository(seed: bool = True) -> InMemoryItemRepository:
    return InMemoryItemRepository(bootstrap_catalog() if seed else [])
