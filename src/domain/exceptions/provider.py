"""MoMo provider-related domain exceptions."""

from typing import Any

from .base import DomainException


class ProviderException(DomainException):
    """
    Raised when a call to the MoMo API fails.

    ``details`` carries the provider's error payload when one was
    returned, otherwise the transport error message.
    """

    def __init__(
        self,
        message: str,
        details: Any = None,
        status_code: int | None = None,
        code: str = "PROVIDER_ERROR",
    ):
        super().__init__(message=message, code=code)
        self.details = details
        self.status_code = status_code


class TokenAcquisitionException(ProviderException):
    """Raised when an access token cannot be obtained."""

    def __init__(self, details: Any = None, status_code: int | None = None):
        super().__init__(
            message="Failed to get access token",
            details=details,
            status_code=status_code,
            code="TOKEN_ACQUISITION_FAILED",
        )


class PaymentSubmissionException(ProviderException):
    """Raised when the provider rejects a request-to-pay."""

    def __init__(self, details: Any = None, status_code: int | None = None):
        super().__init__(
            message="Payment request failed",
            details=details,
            status_code=status_code,
            code="PAYMENT_SUBMISSION_FAILED",
        )


class StatusQueryException(ProviderException):
    """Raised when a payment status lookup fails."""

    def __init__(self, details: Any = None, status_code: int | None = None):
        super().__init__(
            message="Failed to check payment status",
            details=details,
            status_code=status_code,
            code="STATUS_QUERY_FAILED",
        )


class BalanceQueryException(ProviderException):
    """Raised when the account balance lookup fails."""

    def __init__(self, details: Any = None, status_code: int | None = None):
        super().__init__(
            message="Failed to get account balance",
            details=details,
            status_code=status_code,
            code="BALANCE_QUERY_FAILED",
        )
