"""Domain layer - Purchase records, line items and money arithmetic.

This layer contains:
- Entities: Payment, PaymentItem, User
- Value Objects: Immutable objects defined by their attributes (PaymentId, UserId, YearMonth)
- Money: Exact decimal summation helpers
- Domain Exceptions: Validation failures raised at construction time

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
