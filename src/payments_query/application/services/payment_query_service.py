from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from itertools import chain
from typing import TYPE_CHECKING

from payments_query.domain import money

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from payments_query.application.ports import ClockProvider, PaymentSource
    from payments_query.domain.entities import Payment, PaymentItem
    from payments_query.domain.value_objects import YearMonth

logger = logging.getLogger(__name__)


def _instant(moment: datetime) -> datetime:
    # Same-zone aware datetimes compare by wall clock; UTC compares instants.
    return moment.astimezone(UTC)


def _by_payment_date(payment: Payment) -> datetime:
    return _instant(payment.payment_date)


def _by_item_count(payment: Payment) -> int:
    return payment.item_count


def _items_of(payments: Iterable[Payment]) -> Iterable[PaymentItem]:
    return chain.from_iterable(payment.payment_items for payment in payments)


class PaymentQueryService:
    """Read-only queries over the full payment set.

    Every query fetches all payments from the source exactly once and builds
    a new result container. The service keeps no state between calls, so
    concurrent use is safe as long as the source and clock are.

    Ordering:
    - Sorts are stable; ties keep the order the source returned.
    - Descending results are the exact reverse of the ascending ones,
      ties included.
    - Filters preserve source order.
    """

    def __init__(self, payment_source: PaymentSource, clock_provider: ClockProvider) -> None:
        self._payment_source = payment_source
        self._clock = clock_provider

    # =========================================================================
    # Sorting
    # =========================================================================

    def sorted_by_date_asc(self) -> list[Payment]:
        return self._sorted(_by_payment_date, "sorted_by_date_asc")

    def sorted_by_date_desc(self) -> list[Payment]:
        return self._sorted(_by_payment_date, "sorted_by_date_desc", reverse=True)

    def sorted_by_item_count_asc(self) -> list[Payment]:
        return self._sorted(_by_item_count, "sorted_by_item_count_asc")

    def sorted_by_item_count_desc(self) -> list[Payment]:
        return self._sorted(_by_item_count, "sorted_by_item_count_desc", reverse=True)

    # =========================================================================
    # Time filters
    # =========================================================================

    def for_given_month(self, year_month: YearMonth) -> list[Payment]:
        """Payments whose date falls in year_month (year and month both match)."""
        result = [p for p in self._all_payments() if year_month.contains(p.payment_date)]
        self._log("for_given_month", len(result), year_month=str(year_month))
        return result

    def for_current_month(self) -> list[Payment]:
        return self.for_given_month(self._clock.current_year_month())

    def for_last_n_days(self, days: int) -> list[Payment]:
        """Payments strictly inside the window (now - days, now).

        Both bounds are exclusive. A negative day count gives an inverted
        window and therefore an empty result.
        """
        now = _instant(self._clock.now())
        window_start = _window_start(now, days)
        result = [
            p for p in self._all_payments() if window_start < _instant(p.payment_date) < now
        ]
        self._log("for_last_n_days", len(result), days=days)
        return result

    # =========================================================================
    # Derived sets
    # =========================================================================

    def with_exactly_one_item(self) -> set[Payment]:
        result = {p for p in self._all_payments() if p.item_count == 1}
        self._log("with_exactly_one_item", len(result))
        return result

    def products_sold_in_current_month(self) -> set[str]:
        return {item.name for item in _items_of(self.for_current_month())}

    def items_for_user_email(self, email: str) -> list[PaymentItem]:
        """Items bought by the user with this exact email.

        Payment order from the source is kept, then item order within each
        payment. Duplicates are not removed. Unknown emails give [].
        """
        payments = (p for p in self._all_payments() if p.user.email == email)
        result = list(_items_of(payments))
        self._log("items_for_user_email", len(result))
        return result

    def payments_with_value_over(self, threshold: int) -> set[Payment]:
        """Payments whose final-price total is strictly greater than threshold."""
        limit = Decimal(threshold)
        result = {p for p in self._all_payments() if p.total_value() > limit}
        self._log("payments_with_value_over", len(result), threshold=threshold)
        return result

    # =========================================================================
    # Monetary aggregates
    # =========================================================================

    def total_for_given_month(self, year_month: YearMonth) -> Decimal:
        """Exact sum of final prices of every item sold in year_month."""
        items = _items_of(self.for_given_month(year_month))
        return money.total(item.final_price for item in items)

    def discount_for_given_month(self, year_month: YearMonth) -> Decimal:
        """Exact sum of (regular_price - final_price) over items sold in year_month.

        Negative per-item discounts are summed as they are.
        """
        payments = self.for_given_month(year_month)
        return money.total(p.total_discount() for p in payments)

    # =========================================================================
    # Internals
    # =========================================================================

    def _all_payments(self) -> list[Payment]:
        return list(self._payment_source.fetch_all())

    def _sorted(
        self,
        key: Callable[[Payment], datetime | int],
        query: str,
        *,
        reverse: bool = False,
    ) -> list[Payment]:
        # Descending is the ascending result reversed, so tie order flips too.
        result = sorted(self._all_payments(), key=key)
        if reverse:
            result.reverse()
        self._log(query, len(result))
        return result

    def _log(self, query: str, size: int, **fields: object) -> None:
        logger.debug("query completed", extra={"query": query, "result_size": size, **fields})


def _window_start(now: datetime, days: int) -> datetime:
    try:
        return now - timedelta(days=days)
    except OverflowError:
        # Beyond the datetime range: open-ended for large windows, empty for
        # large negative ones.
        return datetime.min.replace(tzinfo=UTC) if days > 0 else datetime.max.replace(tzinfo=UTC)
