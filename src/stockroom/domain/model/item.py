"""Item aggregate: one catalog record.

Items are identified by their product code, which never changes once the
item is stored.  Name is a secondary lookup key.  Insert-time rules
(required fields, code format, uniqueness) need the rest of the inventory
to check, so they live in ``ItemValidationService``; the aggregate only
guards what it can see on its own.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.attribute import Attribute
from stockroom.domain.model.value_objects import Money, Quantity


@dataclass
class Item:
    """Aggregate root for catalog records.

    Invariants:
    - ``quantity`` is a non-negative integer
    - ``price`` is held to the cent (enforced by ``Money``)
    """

    code: str
    name: str
    price: Money
    quantity: int = 0
    attributes: frozenset[Attribute] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Item quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError(
                f"Item quantity cannot be negative, got {self.quantity}"
            )
        self.attributes = frozenset(self.attributes)

    # --- Mutations ------------------------------------------------------------

    def update_info(self, attributes: frozenset[Attribute], price: Money) -> None:
        """Replace descriptive data. Code, name and quantity are untouched."""
        self.attributes = frozenset(attributes)
        self.price = price

    def add_quantity(self, quantity: Quantity) -> None:
        self.quantity += quantity.value

    def merge(self, incoming: Item) -> None:
        """Fold a same-named item into this one.

        Attributes and price are replaced; quantities accumulate.
        The existing code is kept.
        """
        self.update_info(incoming.attributes, incoming.price)
        self.quantity += incoming.quantity

    # --- Copying --------------------------------------------------------------

    def copy(self) -> Item:
        # attributes and price are immutable, a shallow copy is independent
        return dataclasses.replace(self)
