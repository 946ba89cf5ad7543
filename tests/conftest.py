"""Shared pytest fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from decimal import Decimal

import pytest

from payments_query.application.services import PaymentQueryService
from payments_query.domain.entities import Payment, PaymentItem, User
from payments_query.domain.value_objects import PaymentId, UserId
from payments_query.infrastructure.clock_provider import FixedClockProvider
from payments_query.infrastructure.payment_source import InMemoryPaymentSource

PaymentFactory = Callable[..., Payment]


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 4, 10, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock(fixed_time: datetime) -> FixedClockProvider:
    """A clock pinned to fixed_time."""
    return FixedClockProvider(fixed_time)


@pytest.fixture
def user() -> User:
    return User(id=UserId.generate(), email="jan@example.com")


@pytest.fixture
def other_user() -> User:
    return User(id=UserId.generate(), email="anna@example.com")


@pytest.fixture
def make_item() -> Callable[[str, str, str], PaymentItem]:
    """Build a PaymentItem from decimal strings."""

    def _make(name: str, regular: str, final: str) -> PaymentItem:
        return PaymentItem(name=name, regular_price=Decimal(regular), final_price=Decimal(final))

    return _make


@pytest.fixture
def make_payment(user: User, make_item: Callable[[str, str, str], PaymentItem]) -> PaymentFactory:
    """Build a Payment dated payment_date with items given as (name, regular, final)."""

    def _make(
        payment_date: datetime,
        *items: tuple[str, str, str],
        owner: User | None = None,
    ) -> Payment:
        return Payment(
            id=PaymentId.generate(),
            payment_date=payment_date,
            user=owner or user,
            payment_items=tuple(make_item(*item) for item in items),
        )

    return _make


@pytest.fixture
def make_service(clock: FixedClockProvider) -> Callable[..., PaymentQueryService]:
    """Build a query service over the given payments and the fixed clock."""

    def _make(*payments: Payment) -> PaymentQueryService:
        return PaymentQueryService(InMemoryPaymentSource(payments), clock)

    return _make
