"""Pydantic schemas for API request/response validation."""

from .callback import CallbackAcknowledgementSchema
from .error import ErrorResponseSchema
from .payment import (
    AccountBalanceResponseSchema,
    PayerSchema,
    PaymentRequestSchema,
    PaymentStatusResponseSchema,
    PaymentSubmissionResponseSchema,
)

__all__ = [
    "AccountBalanceResponseSchema",
    "CallbackAcknowledgementSchema",
    "ErrorResponseSchema",
    "PayerSchema",
    "PaymentRequestSchema",
    "PaymentStatusResponseSchema",
    "PaymentSubmissionResponseSchema",
]
