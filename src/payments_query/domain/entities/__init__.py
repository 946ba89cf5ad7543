"""Domain entities - Purchase records and the users who made them."""

from payments_query.domain.entities.payment import Payment
from payments_query.domain.entities.payment_item import PaymentItem
from payments_query.domain.entities.user import User

__all__ = [
    "Payment",
    "PaymentItem",
    "User",
]
