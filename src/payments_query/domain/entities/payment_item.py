"""Single purchased line item."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from payments_query.domain import money
from payments_query.domain.exceptions import InvalidPriceError


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """A product line within a payment.

    Prices are exact decimals. final_price is normally at most regular_price,
    but that is not enforced; the discount is computed, never assumed
    non-negative.
    """

    name: str
    regular_price: Decimal
    final_price: Decimal

    def __post_init__(self) -> None:
        _validate_price("regular_price", self.regular_price)
        _validate_price("final_price", self.final_price)

    @property
    def discount(self) -> Decimal:
        """regular_price - final_price, negative when the item was marked up."""
        return money.difference(self.regular_price, self.final_price)


def _validate_price(field: str, value: object) -> None:
    if not isinstance(value, Decimal):
        raise InvalidPriceError(
            f"{field} must be a Decimal, got {type(value).__name__}: {value!r}"
        )
    if not value.is_finite():
        raise InvalidPriceError(f"{field} must be finite, got {value}")
    if value < 0:
        raise InvalidPriceError(f"{field} cannot be negative, got {value}")
