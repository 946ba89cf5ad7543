"""Data Transfer Objects for presenting query results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payments_query.domain.entities import Payment, PaymentItem


@dataclass(frozen=True)
class PaymentItemView:
    """Output DTO for a single line item. Prices are decimal strings."""

    name: str
    regular_price: str
    final_price: str

    @classmethod
    def from_item(cls, item: PaymentItem) -> PaymentItemView:
        return cls(
            name=item.name,
            regular_price=str(item.regular_price),
            final_price=str(item.final_price),
        )


@dataclass(frozen=True)
class PaymentSummary:
    """Output DTO for a payment with its items and final-price total."""

    payment_id: str
    payment_date: str
    user_email: str
    item_count: int
    total: str
    items: tuple[PaymentItemView, ...]

    @classmethod
    def from_payment(cls, payment: Payment) -> PaymentSummary:
        return cls(
            payment_id=str(payment.id),
            payment_date=payment.payment_date.isoformat(),
            user_email=payment.user.email,
            item_count=payment.item_count,
            total=str(payment.total_value()),
            items=tuple(PaymentItemView.from_item(item) for item in payment.payment_items),
        )
