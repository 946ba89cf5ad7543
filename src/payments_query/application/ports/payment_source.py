from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection

    from payments_query.domain.entities import Payment


class PaymentSource(ABC):
    """Port for the complete set of payments.

    Contract:
    - fetch_all() returns every payment, in no particular order
    - Each call returns a consistent snapshot; callers fetch once per query
    - Failures are raised to the caller as-is; there is no partial result
    """

    @abstractmethod
    def fetch_all(self) -> Collection[Payment]:
        """Return all payments.

        Returns:
            An unordered collection of Payment entities. Callers must not
            rely on its iteration order.
        """
