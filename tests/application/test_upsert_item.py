"""Integration tests for the UpsertItem use case."""

from decimal import Decimal

import pytest

from stockroom.application.dto import ItemSpec
from stockroom.application.upsert_item import UpsertItemHandler
from stockroom.domain.exceptions import (
    DuplicateCodeError,
    InternalInconsistencyError,
    MissingFieldError,
)
from stockroom.infrastructure.bootstrap import bootstrap_catalog
from tests.fakes import APPLE, LETTUCE, PEACH, PEPPER, StaleItemRepository, codes, seeded_repo


class TestUpsertExistingName:

    def test_merges_into_existing_item(self):
        repo = seeded_repo()
        inventory = UpsertItemHandler(repo).handle(
            ItemSpec(
                code="ZZZZ-ZZZZ-ZZZZ-ZZZZ",
                name="pEaCh",
                price=3.105,
                quantity=10,
                attributes=frozenset({"fair-trade"}),
            )
        )

        assert codes(inventory) == [LETTUCE, PEACH, PEPPER, APPLE]
        peach = repo.get_by_code(PEACH)
        assert peach.name == "Peach"
        assert peach.quantity == 50
        assert peach.price.amount == Decimal("3.10")
        assert [a.value for a in peach.attributes] == ["fair-trade"]

    def test_merge_without_price_rejected(self):
        repo = seeded_repo()
        with pytest.raises(MissingFieldError, match="price is required"):
            UpsertItemHandler(repo).handle(ItemSpec(code="", name="Peach", price=0, quantity=5))
        assert repo.get_by_code(PEACH).quantity == 40

    def test_failed_write_back_is_internal_inconsistency(self):
        repo = StaleItemRepository(bootstrap_catalog())
        with pytest.raises(InternalInconsistencyError):
            UpsertItemHandler(repo).handle(ItemSpec(code="", name="Peach", price=1))


class TestUpsertNewName:

    def test_appends_new_item(self):
        repo = seeded_repo()
        inventory = UpsertItemHandler(repo).handle(
            ItemSpec(code="M4N5-F0C3-F4gk-si00", name="Tomato", price=3.355, quantity=3)
        )
        assert codes(inventory)[-1] == "M4N5-F0C3-F4gk-si00"
        assert inventory[-1].quantity == 3

    def test_new_item_is_validated(self):
        repo = seeded_repo()
        with pytest.raises(DuplicateCodeError):
            UpsertItemHandler(repo).handle(ItemSpec(code=PEACH, name="Tomato", price=1))
        assert len(repo) == 4
