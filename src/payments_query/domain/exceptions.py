"""Domain exceptions for payments-query.

Exception hierarchy:
    DomainException (base)
    └── Validation Errors (also ValueError)
        ├── InvalidPaymentIdError
        ├── InvalidUserIdError
        ├── InvalidPriceError
        ├── InvalidPaymentDateError
        └── InvalidYearMonthError

Queries never raise for missing data; they return empty containers.
These exceptions only guard entity and value object construction.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class DomainValidationError(DomainException, ValueError):
    """Base for values rejected while building entities or value objects."""


class InvalidPaymentIdError(DomainValidationError):
    """Raised when a payment ID is not a valid UUID."""


class InvalidUserIdError(DomainValidationError):
    """Raised when a user ID is not a valid UUID."""


class InvalidPriceError(DomainValidationError):
    """Raised when an item price is not a finite, non-negative Decimal.

    Floats are rejected outright: binary floating point cannot represent
    most cent amounts exactly.
    """


class InvalidPaymentDateError(DomainValidationError):
    """Raised when a payment date is not timezone-aware.

    Month and day-window filtering rely on the zone the payment carries.
    """


class InvalidYearMonthError(DomainValidationError):
    """Raised when a year-month is out of range or cannot be parsed."""
