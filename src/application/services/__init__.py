"""Application services (use cases)."""

from .payment_service import PaymentService

__all__ = [
    "PaymentService",
]
