"""Data transfer objects for payment operations."""

from dataclasses import dataclass
from typing import Any

PAYMENT_SUBMITTED_MESSAGE = "Payment request submitted successfully"
CALLBACK_RECEIVED_MESSAGE = "Callback received successfully"


@dataclass(frozen=True)
class PaymentSubmissionResponse:
    """Result of a request-to-pay submission."""

    reference_id: str
    message: str = PAYMENT_SUBMITTED_MESSAGE
    success: bool = True


@dataclass(frozen=True)
class PaymentStatusResponse:
    """Provider status for a reference, passed through verbatim."""

    status: Any
    data: Any
    success: bool = True


@dataclass(frozen=True)
class AccountBalanceResponse:
    """Provider balance payload, passed through verbatim."""

    balance: Any
    success: bool = True


@dataclass(frozen=True)
class CallbackAcknowledgement:
    message: str = CALLBACK_RECEIVED_MESSAGE
