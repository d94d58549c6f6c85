"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

from stockroom.domain.exceptions import ValidationError

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount, always held at two decimal places.

    Uses Decimal to avoid floating-point drift once a price is stored.
    The rounding itself happens in ``Money.of``.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount != self.amount.quantize(CENT):
            raise ValidationError(
                f"Money amount must have at most two decimals, got {self.amount}"
            )

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Round *amount* to the nearest cent and wrap it.

        Every input is read as a float and converted exactly
        (``Decimal(3.355)`` is slightly below 3.355), so strings, ints,
        Decimals and floats all round like ``f"{float(amount):.2f}"``:
        3.355 -> 3.35, 1.299 -> 1.30, 2.208 -> 2.21.
        """
        try:
            exact = Decimal(float(amount))
            return Money(exact.quantize(CENT, rounding=ROUND_HALF_EVEN))
        except (InvalidOperation, ValueError, TypeError, OverflowError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Used for quantity increments: adding zero or negative units is
    rejected.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
