"""Application service: Update Item Info use case."""

from __future__ import annotations

import structlog

from stockroom.application.create_items import parse_attributes
from stockroom.application.dto import ItemDTO, to_inventory_dto
from stockroom.domain.exceptions import (
    EntityNotFoundError,
    InternalInconsistencyError,
)
from stockroom.domain.model.value_objects import Money
from stockroom.domain.repository.item_repository import ItemRepository

logger = structlog.get_logger(__name__)


class UpdateItemInfoHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(
        self,
        code: str,
        attributes: frozenset[str] | list[str],
        price: str | float | int,
    ) -> list[ItemDTO]:
        """Replace an item's attributes and price.

        Code, name and quantity are kept, so a client that never sends a
        quantity cannot wipe it out.
        """
        item = self._item_repo.get_by_code(code)
        if item is None:
            raise EntityNotFoundError(f"Item with code '{code}' not found")

        item.update_info(parse_attributes(attributes), Money.of(price))

        if not self._item_repo.update(item):
            raise InternalInconsistencyError(
                f"Item '{code}' was found but could not be updated"
            )

        logger.info("Item info updated", code=item.code, price=str(item.price))
        return to_inventory_dto(self._item_repo.list_all())
