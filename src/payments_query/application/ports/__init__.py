"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payments_query.application.ports.clock_provider import ClockProvider
from payments_query.application.ports.payment_source import PaymentSource

__all__ = [
    "ClockProvider",
    "PaymentSource",
]
