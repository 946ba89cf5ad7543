"""Tests for the Payment entity.

Tests cover:
- Timezone-aware payment dates
- Item normalization to a tuple, empty payments
- Exact totals and discounts
- Value equality and hashing for use in sets
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from payments_query.domain.entities import Payment, PaymentItem, User
from payments_query.domain.exceptions import InvalidPaymentDateError
from payments_query.domain.value_objects import PaymentId, UserId

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def buyer() -> User:
    return User(id=UserId.generate(), email="jan@example.com")


@pytest.fixture
def items() -> list[PaymentItem]:
    return [
        PaymentItem(name="Keyboard", regular_price=Decimal("120.00"), final_price=Decimal("99.99")),
        PaymentItem(name="Cable", regular_price=Decimal("9.90"), final_price=Decimal("9.90")),
    ]


def _payment(buyer: User, items: list[PaymentItem], **overrides: object) -> Payment:
    fields: dict[str, object] = {
        "id": PaymentId.generate(),
        "payment_date": datetime(2024, 3, 15, 10, 0, tzinfo=UTC),
        "user": buyer,
        "payment_items": items,
    }
    fields.update(overrides)
    return Payment(**fields)  # type: ignore[arg-type]


# =============================================================================
# Creation Tests
# =============================================================================


class TestPaymentCreation:
    def test_items_are_stored_as_tuple(self, buyer: User, items: list[PaymentItem]) -> None:
        payment = _payment(buyer, items)

        assert payment.payment_items == tuple(items)
        assert isinstance(payment.payment_items, tuple)

    def test_items_list_mutation_does_not_leak(
        self, buyer: User, items: list[PaymentItem]
    ) -> None:
        payment = _payment(buyer, items)

        items.clear()

        assert payment.item_count == 2

    def test_accepts_generator_of_items(self, buyer: User, items: list[PaymentItem]) -> None:
        payment = _payment(buyer, items, payment_items=(item for item in items))

        assert payment.item_count == 2

    def test_rejects_naive_payment_date(self, buyer: User, items: list[PaymentItem]) -> None:
        with pytest.raises(InvalidPaymentDateError, match="timezone-aware"):
            _payment(buyer, items, payment_date=datetime(2024, 3, 15, 10, 0))

    def test_is_frozen(self, buyer: User, items: list[PaymentItem]) -> None:
        payment = _payment(buyer, items)

        with pytest.raises(AttributeError):
            payment.user = buyer  # type: ignore[misc]


# =============================================================================
# Aggregate Tests
# =============================================================================


class TestPaymentTotals:
    def test_item_count(self, buyer: User, items: list[PaymentItem]) -> None:
        assert _payment(buyer, items).item_count == 2

    def test_total_value_sums_final_prices(self, buyer: User, items: list[PaymentItem]) -> None:
        assert _payment(buyer, items).total_value() == Decimal("109.89")

    def test_total_discount_sums_item_discounts(
        self, buyer: User, items: list[PaymentItem]
    ) -> None:
        assert _payment(buyer, items).total_discount() == Decimal("20.01")

    def test_empty_payment_totals_are_zero(self, buyer: User) -> None:
        payment = _payment(buyer, [])

        assert payment.item_count == 0
        assert payment.total_value() == Decimal("0")
        assert payment.total_discount() == Decimal("0")


# =============================================================================
# Equality Tests
# =============================================================================


class TestPaymentEquality:
    def test_payments_with_different_ids_are_distinct(
        self, buyer: User, items: list[PaymentItem]
    ) -> None:
        first = _payment(buyer, items)
        second = _payment(buyer, items, payment_date=first.payment_date)

        assert first != second
        assert len({first, second}) == 2

    def test_payment_is_hashable(self, buyer: User, items: list[PaymentItem]) -> None:
        payment = _payment(buyer, items)

        assert {payment, payment} == {payment}

    def test_payments_share_user_reference(self, buyer: User, items: list[PaymentItem]) -> None:
        first = _payment(buyer, items)
        second = _payment(buyer, [])

        assert first.user is second.user
