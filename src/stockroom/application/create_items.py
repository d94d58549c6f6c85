"""Application service: Create Items use case.

A single-item create is a batch of one.  The whole batch is validated
before the first append, so a rejected batch leaves the inventory
exactly as it was.
"""

from __future__ import annotations

import structlog

from stockroom.application.dto import ItemDTO, ItemSpec, to_inventory_dto
from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.attribute import Attribute
from stockroom.domain.model.item import Item
from stockroom.domain.model.value_objects import Money
from stockroom.domain.repository.item_repository import ItemRepository
from stockroom.domain.service.item_validation_service import ItemValidationService

logger = structlog.get_logger(__name__)


def parse_attributes(raw: frozenset[str] | set[str] | list[str]) -> frozenset[Attribute]:
    """Map tag strings onto the Attribute enum, rejecting unknown tags."""
    try:
        return frozenset(Attribute(value) for value in raw)
    except ValueError as exc:
        raise ValidationError(f"Unknown item attribute: {exc}") from exc


def item_from_spec(spec: ItemSpec) -> Item:
    """Build an Item with its price rounded to the cent."""
    return Item(
        code=spec.code,
        name=spec.name.strip(),
        price=Money.of(spec.price),
        quantity=spec.quantity,
        attributes=parse_attributes(spec.attributes),
    )


class CreateItemsHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, specs: list[ItemSpec]) -> list[ItemDTO]:
        """Add every item, or none of them.

        Steps:
        1. Build Items (rounds prices, rejects unknown attributes).
        2. Validate the batch against the store and against itself.
        3. Append in submission order and return the full inventory.
        """
        items = [item_from_spec(spec) for spec in specs]

        ItemValidationService(self._item_repo).validate_batch(items)

        for item in items:
            self._item_repo.add(item)

        logger.info(
            "Items created",
            count=len(items),
            codes=[item.code for item in items],
        )
        return to_inventory_dto(self._item_repo.list_all())
