"""Payment entities for the request-to-pay flow."""

from dataclasses import dataclass
from typing import Any

DEFAULT_CURRENCY = "EUR"
DEFAULT_PAYER_MESSAGE = "Payment request"
DEFAULT_PAYEE_NOTE = "Payment from your app"
MSISDN = "MSISDN"

REQUIRED_FIELDS = ("amount", "currency", "externalId", "payer.partyId")


@dataclass(frozen=True)
class Payer:
    """The subscriber being asked to pay."""

    party_id: str | int | None
    party_id_type: str = MSISDN

    def to_provider_payload(self) -> dict[str, Any]:
        return {"partyIdType": self.party_id_type, "partyId": as_text(self.party_id)}


@dataclass(frozen=True)
class PaymentRequest:
    """
    A request-to-pay as received from the caller.

    Fields are kept loosely typed because callers may send the amount,
    external id or party id as a number or a string; ``missing_fields`` decides whether the request
    can be forwarded.
    """

    amount: Any
    currency: str | None
    external_id: str | int | None
    payer: Payer | None
    payer_message: str | None = None
    payee_note: str | None = None

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or empty."""
        values = {
            "amount": self.amount,
            "currency": self.currency,
            "externalId": self.external_id,
            "payer.partyId": self.payer.party_id if self.payer else None,
        }
        return [name for name in REQUIRED_FIELDS if not values[name]]

    def to_provider_payload(self) -> dict[str, Any]:
        """Shape the request body expected by ``/collection/v1_0/requesttopay``."""
        payer = self.payer or Payer(party_id=None)
        return {
            "amount": format_amount(self.amount),
            "currency": self.currency or DEFAULT_CURRENCY,
            "externalId": as_text(self.external_id),
            "payer": payer.to_provider_payload(),
            "payerMessage": self.payer_message or DEFAULT_PAYER_MESSAGE,
            "payeeNote": self.payee_note or DEFAULT_PAYEE_NOTE,
        }


@dataclass(frozen=True)
class PaymentStatusResult:
    """Status of a request-to-pay as reported by the provider."""

    status: Any
    data: Any

    @classmethod
    def from_response(cls, data: Any) -> "PaymentStatusResult":
        status = data.get("status") if isinstance(data, dict) else None
        return cls(status=status, data=data)


def format_amount(amount: Any) -> str:
    """Render an amount the way the provider expects it: as a string.

    Integral floats drop their fractional part so ``500.0`` becomes ``"500"``.
    """
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def as_text(value: Any) -> str | None:
    """Identifiers go to the provider as strings; absent values stay absent."""
    if value is None or isinstance(value, str):
        return value
    return str(value)
