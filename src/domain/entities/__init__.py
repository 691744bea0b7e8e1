"""Domain Entities - Core business objects."""

from .callback import CallbackNotification
from .credentials import ProviderCredentials
from .payment import Payer, PaymentRequest, PaymentStatusResult
from .token import AccessToken

__all__ = [
    "AccessToken",
    "CallbackNotification",
    "Payer",
    "PaymentRequest",
    "PaymentStatusResult",
    "ProviderCredentials",
]
