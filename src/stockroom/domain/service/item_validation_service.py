"""Domain service: insert-time validation of items.

Checking that a code is free needs the whole inventory, so these rules
live here rather than on the Item aggregate.  Checks run in a fixed
order and the first violation wins:

    missing field (code, name, price) -> malformed code -> duplicate code

A zero price counts as missing.
"""

from __future__ import annotations

from collections.abc import Iterable

from stockroom.domain.exceptions import (
    DuplicateCodeError,
    MalformedCodeError,
    MissingFieldError,
)
from stockroom.domain.model.item import Item
from stockroom.domain.model.product_code import is_valid_code, normalize
from stockroom.domain.repository.item_repository import ItemRepository


class ItemValidationService:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def validate_for_insert(
        self, item: Item, reserved_codes: Iterable[str] = ()
    ) -> None:
        """Raise the first rule *item* breaks, or return None.

        ``reserved_codes`` are normalized codes that are not stored yet
        but already claimed (earlier members of the same batch).
        """
        if not item.code:
            raise MissingFieldError("Item code is required")
        if not item.name or not item.name.strip():
            raise MissingFieldError("Item name is required")
        if item.price.is_zero:
            raise MissingFieldError(f"Item price is required for '{item.name}'")

        if not is_valid_code(item.code):
            raise MalformedCodeError(
                f"Item code '{item.code}' must look like XXXX-XXXX-XXXX-XXXX"
            )

        if (
            normalize(item.code) in reserved_codes
            or self._item_repo.get_by_code(item.code) is not None
        ):
            raise DuplicateCodeError(f"Item code '{item.code}' already exists")

    def validate_batch(self, items: list[Item]) -> None:
        """Validate every item before anything is written.

        Duplicates are checked against the store and against codes
        claimed earlier in the same batch.
        """
        claimed: set[str] = set()
        for item in items:
            self.validate_for_insert(item, reserved_codes=claimed)
            claimed.add(normalize(item.code))
