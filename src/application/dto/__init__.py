"""Data Transfer Objects for the application layer."""

from .payment import (
    AccountBalanceResponse,
    CallbackAcknowledgement,
    PaymentStatusResponse,
    PaymentSubmissionResponse,
)

__all__ = [
    "AccountBalanceResponse",
    "CallbackAcknowledgement",
    "PaymentStatusResponse",
    "PaymentSubmissionResponse",
]
