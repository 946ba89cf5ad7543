"""Application services."""

from payments_query.application.services.payment_query_service import PaymentQueryService

__all__ = ["PaymentQueryService"]
