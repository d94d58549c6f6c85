"""Application service: Delete Item use case."""

from __future__ import annotations

import structlog

from stockroom.application.dto import ItemDTO, to_inventory_dto
from stockroom.domain.exceptions import EntityNotFoundError
from stockroom.domain.repository.item_repository import ItemRepository

logger = structlog.get_logger(__name__)


class DeleteItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, code: str) -> list[ItemDTO]:
        """Remove the item with *code*; later items shift up one place."""
        if not self._item_repo.remove(code):
            raise EntityNotFoundError(f"Item with code '{code}' not found")

        logger.info("Item deleted", code=code)
        return to_inventory_dto(self._item_repo.list_all())
