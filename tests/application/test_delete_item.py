"""Integration tests for the DeleteItem use case."""

import pytest

from stockroom.application.delete_item import DeleteItemHandler
from stockroom.domain.exceptions import EntityNotFoundError
from tests.fakes import APPLE, LETTUCE, PEACH, PEPPER, codes, seeded_repo


class TestDeleteItem:

    def test_delete_in_mixed_case_shifts_successors(self):
        repo = seeded_repo()
        inventory = DeleteItemHandler(repo).handle("a12T-4Gh7-QPl9-3n4M")
        assert codes(inventory) == [PEACH, PEPPER, APPLE]

    def test_delete_from_middle(self):
        inventory = DeleteItemHandler(seeded_repo()).handle(PEPPER)
        assert codes(inventory) == [LETTUCE, PEACH, APPLE]

    def test_unknown_code_leaves_inventory_unchanged(self):
        repo = seeded_repo()
        before = repo.list_all()

        with pytest.raises(EntityNotFoundError, match="not found"):
            DeleteItemHandler(repo).handle("Th1s-P1Dd-N0t3-X1ST")

        assert repo.list_all() == before

    def test_second_delete_is_not_found(self):
        repo = seeded_repo()
        handler = DeleteItemHandler(repo)
        handler.handle(PEACH)
        with pytest.raises(EntityNotFoundError):
            handler.handle(PEACH)
