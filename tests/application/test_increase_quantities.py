"""Integration tests for the IncreaseQuantities use case."""

import pytest

from stockroom.application.dto import QuantityIncrease
from stockroom.application.increase_quantities import IncreaseQuantitiesHandler
from stockroom.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import APPLE, LETTUCE, PEACH, seeded_repo


class TestIncreaseQuantities:

    def test_increments_every_item(self):
        repo = seeded_repo()
        inventory = IncreaseQuantitiesHandler(repo).handle(
            [QuantityIncrease("a12t-4gh7-qpl9-3n4m", 5), QuantityIncrease(APPLE, 20)]
        )

        quantities = {dto.code: dto.quantity for dto in inventory}
        assert quantities[LETTUCE] == 30
        assert quantities[APPLE] == 100
        assert quantities[PEACH] == 40

    def test_repeated_code_accumulates(self):
        repo = seeded_repo()
        IncreaseQuantitiesHandler(repo).handle(
            [QuantityIncrease(PEACH, 1), QuantityIncrease(PEACH.lower(), 2)]
        )
        assert repo.get_by_code(PEACH).quantity == 43

    def test_unknown_code_applies_nothing(self):
        """If Lettuce resolves but the second code does not, Lettuce is untouched."""
        repo = seeded_repo()
        before = repo.list_all()

        with pytest.raises(EntityNotFoundError, match="not found"):
            IncreaseQuantitiesHandler(repo).handle(
                [
                    QuantityIncrease(LETTUCE, 5),
                    QuantityIncrease("Th1s-P1Dd-N0t3-X1ST", 1),
                    QuantityIncrease(APPLE, 5),
                ]
            )

        assert repo.list_all() == before

    def test_non_positive_delta_rejected(self):
        repo = seeded_repo()
        with pytest.raises(ValidationError, match="must be positive"):
            IncreaseQuantitiesHandler(repo).handle(
                [QuantityIncrease(LETTUCE, 5), QuantityIncrease(APPLE, 0)]
            )
        assert repo.get_by_code(LETTUCE).quantity == 25
