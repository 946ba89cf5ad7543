from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from payments_query.domain.value_objects import YearMonth

if TYPE_CHECKING:
    from datetime import datetime


class ClockProvider(ABC):
    """Port for the current time.

    Contract:
    - now() MUST return a timezone-aware datetime
    - current_year_month() MUST agree with now(); the default implementation
      derives it from a single now() read so the two cannot straddle a
      month boundary
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""
        ...

    def current_year_month(self) -> YearMonth:
        """Return the year and month of now() in the clock's zone."""
        return YearMonth.from_datetime(self.now())
