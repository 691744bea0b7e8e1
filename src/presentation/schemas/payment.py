"""Pydantic schemas for payment endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PayerSchema(BaseModel):
    """The subscriber asked to pay."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    party_id: str | int | None = Field(
        None,
        alias="partyId",
        description="Mobile subscriber number (MSISDN)",
        examples=["46733123450"],
    )


class PaymentRequestSchema(BaseModel):
    """
    Request body for POST /api/request-payment.

    Every field is optional at the schema level; missing required fields
    are reported by the service with a 400.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "amount": "500",
                    "currency": "EUR",
                    "externalId": "ext-1",
                    "payer": {"partyId": "46733123450"},
                    "payerMessage": "Order #42",
                    "payeeNote": "Thanks",
                }
            ]
        },
    )

    amount: str | int | float | None = Field(None, description="Amount to collect")
    currency: str | None = Field(None, description="ISO 4217 currency code")
    external_id: str | int | None = Field(
        None,
        alias="externalId",
        description="Caller-supplied correlation key",
    )
    payer: PayerSchema | None = None
    payer_message: str | None = Field(None, alias="payerMessage")
    payee_note: str | None = Field(None, alias="payeeNote")


class PaymentSubmissionResponseSchema(BaseModel):
    """Response for a submitted request-to-pay."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    reference_id: str = Field(
        ...,
        alias="referenceId",
        description="Reference to use for status lookups",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )
    message: str = Field(..., examples=["Payment request submitted successfully"])


class PaymentStatusResponseSchema(BaseModel):
    """Provider status for a reference, passed through verbatim."""

    success: bool = True
    status: Any = Field(None, examples=["SUCCESSFUL"])
    data: Any = None


class AccountBalanceResponseSchema(BaseModel):
    """Provider balance payload, passed through verbatim."""

    success: bool = True
    balance: Any = Field(
        None,
        examples=[{"availableBalance": "1000", "currency": "EUR"}],
    )
