"""Payment API endpoints proxied to the MoMo Collection API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from src.application.services import PaymentService
from src.core.dependencies import get_payment_service
from src.domain.entities import Payer, PaymentRequest
from src.presentation.schemas import (
    AccountBalanceResponseSchema,
    ErrorResponseSchema,
    PaymentRequestSchema,
    PaymentStatusResponseSchema,
    PaymentSubmissionResponseSchema,
)

payment_router = APIRouter(
    prefix="/api",
    responses={
        500: {"model": ErrorResponseSchema, "description": "MoMo API call failed"},
    },
)


@payment_router.post(
    "/request-payment",
    response_model=PaymentSubmissionResponseSchema,
    status_code=200,
    summary="Request to Pay",
    description="""
    Ask a mobile-money subscriber to approve a payment.

    Returns the reference generated for the request; the outcome is
    available later from the status endpoint or the callback.
    """,
    responses={
        200: {"description": "Payment request submitted"},
        400: {"model": ErrorResponseSchema, "description": "Missing required fields"},
    },
)
async def request_payment(
    request: PaymentRequestSchema,
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> PaymentSubmissionResponseSchema:
    payment_request = PaymentRequest(
        amount=request.amount,
        currency=request.currency,
        external_id=request.external_id,
        payer=Payer(party_id=request.payer.party_id) if request.payer else None,
        payer_message=request.payer_message,
        payee_note=request.payee_note,
    )

    response = await payment_service.initiate_payment(payment_request)

    return PaymentSubmissionResponseSchema(
        success=response.success,
        reference_id=response.reference_id,
        message=response.message,
    )


@payment_router.get(
    "/payment-status/{reference_id}",
    response_model=PaymentStatusResponseSchema,
    summary="Get Payment Status",
    description="Return the provider's status payload for a request-to-pay.",
)
async def get_payment_status(
    reference_id: Annotated[
        str,
        Path(description="Reference returned by request-payment"),
    ],
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> PaymentStatusResponseSchema:
    response = await payment_service.get_payment_status(reference_id)

    return PaymentStatusResponseSchema(
        success=response.success,
        status=response.status,
        data=response.data,
    )


@payment_router.get(
    "/account-balance",
    response_model=AccountBalanceResponseSchema,
    summary="Get Account Balance",
    description="Return the collection account balance as reported by the provider.",
)
async def get_account_balance(
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> AccountBalanceResponseSchema:
    response = await payment_service.get_account_balance()

    return AccountBalanceResponseSchema(
        success=response.success,
        balance=response.balance,
    )
