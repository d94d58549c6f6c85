"""Application service: List Inventory use case (query)."""

from __future__ import annotations

from stockroom.application.dto import ItemDTO, to_inventory_dto
from stockroom.domain.repository.item_repository import ItemRepository


class ListInventoryHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self) -> list[ItemDTO]:
        return to_inventory_dto(self._item_repo.list_all())
