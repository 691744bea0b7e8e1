"""Domain Exceptions - Validation and provider errors."""

from .base import DomainException
from .provider import (
    BalanceQueryException,
    PaymentSubmissionException,
    ProviderException,
    StatusQueryException,
    TokenAcquisitionException,
)
from .validation import PaymentValidationException

__all__ = [
    "DomainException",
    "PaymentValidationException",
    "ProviderException",
    "TokenAcquisitionException",
    "PaymentSubmissionException",
    "StatusQueryException",
    "BalanceQueryException",
]
