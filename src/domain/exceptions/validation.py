"""Request validation exceptions."""

from .base import DomainException


class PaymentValidationException(DomainException):
    """Raised when a payment request is missing required fields."""

    http_status = 400

    def __init__(self, missing_fields: list[str]):
        super().__init__(
            message=(
                "Missing required fields: amount, currency, externalId, payer.partyId"
            ),
            code="VALIDATION_ERROR",
        )
        self.missing_fields = missing_fields
