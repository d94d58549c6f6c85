"""Application service: Upsert Item use case.

Items are matched by name.  A known name merges into the existing
record (attributes and price replaced, quantities summed, code kept);
an unknown name goes through the normal create path.
"""

from __future__ import annotations

import structlog

from stockroom.application.create_items import item_from_spec
from stockroom.application.dto import ItemDTO, ItemSpec, to_inventory_dto
from stockroom.domain.exceptions import (
    InternalInconsistencyError,
    MissingFieldError,
)
from stockroom.domain.repository.item_repository import ItemRepository
from stockroom.domain.service.item_validation_service import ItemValidationService

logger = structlog.get_logger(__name__)


class UpsertItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, spec: ItemSpec) -> list[ItemDTO]:
        incoming = item_from_spec(spec)

        existing = self._item_repo.get_by_name(incoming.name)
        if existing is None:
            ItemValidationService(self._item_repo).validate_for_insert(incoming)
            self._item_repo.add(incoming)
            logger.info("Item created by upsert", code=incoming.code, name=incoming.name)
        else:
            if incoming.price.is_zero:
                raise MissingFieldError(f"Item price is required for '{incoming.name}'")
            existing.merge(incoming)
            if not self._item_repo.update(existing):
                raise InternalInconsistencyError(
                    f"Item '{existing.code}' vanished while merging '{existing.name}'"
                )
            logger.info(
                "Item merged by upsert",
                code=existing.code,
                name=existing.name,
                quantity=existing.quantity,
            )

        return to_inventory_dto(self._item_repo.list_all())
