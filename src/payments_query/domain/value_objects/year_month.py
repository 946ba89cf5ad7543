"""Calendar month of a specific year."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from payments_query.domain.exceptions import InvalidYearMonthError

if TYPE_CHECKING:
    from datetime import datetime

MIN_YEAR = 1
MAX_YEAR = 9999

_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """A (year, month) pair.

    Both fields take part in equality: March 2023 and March 2024 are
    different months. Ordering is chronological.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidYearMonthError(
                f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got {self.year}"
            )
        if not 1 <= self.month <= 12:
            raise InvalidYearMonthError(f"Month must be between 1 and 12, got {self.month}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> YearMonth:
        """Take the year and month of dt as seen in its own timezone.

        No conversion happens: 2024-03-31T23:30-05:00 belongs to March even
        though the same instant is April in UTC.
        """
        return cls(year=dt.year, month=dt.month)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse a ``YYYY-MM`` string.

        Raises:
            InvalidYearMonthError: If text is not in ``YYYY-MM`` form or out of range.
        """
        match = _PATTERN.match(text.strip())
        if match is None:
            raise InvalidYearMonthError(f"Expected YYYY-MM, got {text!r}")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    def contains(self, dt: datetime) -> bool:
        return dt.year == self.year and dt.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
