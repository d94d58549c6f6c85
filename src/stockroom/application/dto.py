"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from stockroom.domain.model.attribute import sorted_values
from stockroom.domain.model.item import Item


@dataclass(frozen=True)
class ItemSpec:
    """Input: an item as submitted by a client.

    Missing ``code``/``name`` arrive as empty strings and a missing price
    as zero, so the validation service can report them uniformly.
    """

    code: str
    name: str
    price: str | float | int | Decimal
    quantity: int = 0
    attributes: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class QuantityIncrease:
    """Input: add ``delta`` units to the item with ``code``."""

    code: str
    delta: int


@dataclass(frozen=True)
class ItemDTO:
    """Output: a single item as shown to the client."""

    code: str
    name: str
    attributes: list[str]
    price: Decimal
    quantity: int


def to_item_dto(item: Item) -> ItemDTO:
    return ItemDTO(
        code=item.code,
        name=item.name,
        attributes=sorted_values(item.attributes),
        price=item.price.amount,
        quantity=item.quantity,
    )


def to_inventory_dto(items: list[Item]) -> list[ItemDTO]:
    return [to_item_dto(item) for item in items]
