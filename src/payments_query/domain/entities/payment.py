"""Payment entity: one purchase made by a user at a point in time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from payments_query.domain import money
from payments_query.domain.exceptions import InvalidPaymentDateError

if TYPE_CHECKING:
    from datetime import datetime
    from decimal import Decimal

    from payments_query.domain.entities.payment_item import PaymentItem
    from payments_query.domain.entities.user import User
    from payments_query.domain.value_objects import PaymentId


@dataclass(frozen=True, slots=True)
class Payment:
    """A purchase record.

    Payment is immutable (frozen dataclass). payment_items accepts any
    iterable and is stored as a tuple; it may be empty. The user is a shared
    reference: several payments may point at the same User instance.

    payment_date must be timezone-aware. Its own zone decides which calendar
    month the payment falls into.
    """

    id: PaymentId
    payment_date: datetime
    user: User
    payment_items: tuple[PaymentItem, ...]

    def __post_init__(self) -> None:
        if self.payment_date.tzinfo is None or self.payment_date.utcoffset() is None:
            raise InvalidPaymentDateError(
                f"payment_date must be timezone-aware, got {self.payment_date.isoformat()}"
            )
        if not isinstance(self.payment_items, tuple):
            object.__setattr__(self, "payment_items", tuple(self.payment_items))

    @property
    def item_count(self) -> int:
        return len(self.payment_items)

    def total_value(self) -> Decimal:
        """Exact sum of final prices; zero for a payment without items."""
        return money.total(item.final_price for item in self.payment_items)

    def total_discount(self) -> Decimal:
        """Exact sum of per-item discounts, negative discounts included."""
        return money.total(item.discount for item in self.payment_items)
