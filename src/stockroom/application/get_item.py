"""Application service: Get Item use case (query).

The search value is either a product code or an item name.  Anything
shaped like a code is looked up by code only, so a malformed code is
treated as a name (and will normally not be found).
"""

from __future__ import annotations

from stockroom.application.dto import ItemDTO, to_item_dto
from stockroom.domain.exceptions import EntityNotFoundError
from stockroom.domain.model.product_code import is_valid_code
from stockroom.domain.repository.item_repository import ItemRepository


class GetItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, search_value: str) -> ItemDTO:
        if is_valid_code(search_value):
            item = self._item_repo.get_by_code(search_value)
        else:
            item = self._item_repo.get_by_name(search_value)

        if item is None:
            raise EntityNotFoundError(f"No item matches '{search_value}'")
        return to_item_dto(item)
