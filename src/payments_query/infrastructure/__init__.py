"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Payment Sources: In-memory snapshot and JSON file loader
- Clock Providers: System clock and a fixed clock for tests
- Logging: Root logger configuration

Infrastructure adapters implement the ports defined in the application layer.
"""

from payments_query.infrastructure.clock_provider import FixedClockProvider, SystemClockProvider
from payments_query.infrastructure.json_payment_source import (
    JsonFilePaymentSource,
    PaymentDataError,
)
from payments_query.infrastructure.payment_source import InMemoryPaymentSource

__all__ = [
    "FixedClockProvider",
    "InMemoryPaymentSource",
    "JsonFilePaymentSource",
    "PaymentDataError",
    "SystemClockProvider",
]
