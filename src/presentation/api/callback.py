"""Callback endpoint for MoMo payment-result notifications."""

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from src.application.services import PaymentService
from src.core.dependencies import get_payment_service
from src.presentation.schemas import CallbackAcknowledgementSchema

callback_router = APIRouter()


async def _read_payload(request: Request) -> Any:
    """Decode the body as JSON, falling back to text for anything else."""
    body = await request.body()
    if not body:
        return None

    try:
        return json.loads(body)
    except ValueError:
        return body.decode("utf-8", errors="replace")


@callback_router.post(
    "/callback",
    response_model=CallbackAcknowledgementSchema,
    status_code=200,
    summary="MoMo Callback",
    description="""
    Receive an asynchronous payment-result notification from MoMo.

    Any body is accepted and acknowledged. The sender is not
    authenticated.
    """,
)
async def receive_callback(
    request: Request,
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> CallbackAcknowledgementSchema:
    payload = await _read_payload(request)
    ack = await payment_service.receive_callback(payload)

    return CallbackAcknowledgementSchema(message=ack.message)
