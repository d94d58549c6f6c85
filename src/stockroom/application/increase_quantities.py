"""Application service: Increase Quantities use case.

Uses a two-phase approach so a restock is all-or-nothing:
  Phase 1 - resolve every code and compute the new quantities on copies.
            Fails before any write if a code is unknown.
  Phase 2 - write every updated item back.
"""

from __future__ import annotations

import structlog

from stockroom.application.dto import ItemDTO, QuantityIncrease, to_inventory_dto
from stockroom.domain.exceptions import (
    EntityNotFoundError,
    InternalInconsistencyError,
)
from stockroom.domain.model.item import Item
from stockroom.domain.model.product_code import normalize
from stockroom.domain.model.value_objects import Quantity
from stockroom.domain.repository.item_repository import ItemRepository

logger = structlog.get_logger(__name__)


class IncreaseQuantitiesHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, requests: list[QuantityIncrease]) -> list[ItemDTO]:
        # Phase 1: resolve and compute; repeated codes accumulate
        pending: dict[str, Item] = {}
        for request in requests:
            delta = Quantity(request.delta)
            key = normalize(request.code)
            item = pending.get(key)
            if item is None:
                item = self._item_repo.get_by_code(request.code)
                if item is None:
                    raise EntityNotFoundError(
                        f"Item with code '{request.code}' not found"
                    )
                pending[key] = item
            item.add_quantity(delta)

        # Phase 2: write back
        for item in pending.values():
            if not self._item_repo.update(item):
                raise InternalInconsistencyError(
                    f"Item '{item.code}' was resolved but could not be restocked"
                )

        logger.info(
            "Quantities increased",
            items={item.code: item.quantity for item in pending.values()},
        )
        return to_inventory_dto(self._item_repo.list_all())
