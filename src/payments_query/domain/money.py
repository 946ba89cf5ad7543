"""Exact decimal arithmetic for monetary amounts.

Sums are computed under a context with the maximum supported precision, so
adding any number of amounts never rounds regardless of magnitude or scale.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, InvalidOperation
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

ZERO = Decimal("0")

_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[InvalidOperation])


def total(amounts: Iterable[Decimal]) -> Decimal:
    """Sum amounts exactly, starting from zero."""
    result = ZERO
    for amount in amounts:
        result = _EXACT.add(result, amount)
    return result


def difference(minuend: Decimal, subtrahend: Decimal) -> Decimal:
    """Return minuend - subtrahend without rounding."""
    return _EXACT.subtract(minuend, subtrahend)
