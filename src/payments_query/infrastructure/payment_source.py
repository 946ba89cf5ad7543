from __future__ import annotations

from typing import TYPE_CHECKING

from payments_query.application.ports import PaymentSource

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payments_query.domain.entities import Payment


class InMemoryPaymentSource(PaymentSource):
    """Payment source backed by a fixed in-memory snapshot.

    Implementation notes:
    - The payments are captured as a tuple at construction time
    - fetch_all() hands out a new list each call, so callers cannot
      alter the snapshot
    - Entities are frozen, so no copying of the payments themselves is needed
    """

    def __init__(self, payments: Iterable[Payment] = ()) -> None:
        self._payments: tuple[Payment, ...] = tuple(payments)

    def fetch_all(self) -> list[Payment]:
        return list(self._payments)
