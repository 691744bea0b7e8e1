"""Payment service - the gateway's use cases in front of the MoMo API."""

from typing import Any, Callable, Type
from uuid import uuid4

import structlog

from src.core.metrics import record_callback_received, record_payment_request
from src.domain.entities import AccessToken, CallbackNotification, PaymentRequest
from src.domain.exceptions import (
    BalanceQueryException,
    PaymentSubmissionException,
    PaymentValidationException,
    ProviderException,
    StatusQueryException,
    TokenAcquisitionException,
)
from src.domain.interfaces import CollectionClient
from src.application.dto import (
    AccountBalanceResponse,
    CallbackAcknowledgement,
    PaymentStatusResponse,
    PaymentSubmissionResponse,
)

logger = structlog.get_logger(__name__)


def generate_reference_id() -> str:
    return str(uuid4())


class PaymentService:
    """
    Application service for collection use cases.

    Every operation acquires a fresh access token and then makes exactly
    one domain call. Nothing is cached between invocations. Token failures
    are reported as the failing operation; other provider failures are
    raised to the caller untouched.
    """

    def __init__(
        self,
        collection_client: CollectionClient,
        reference_factory: Callable[[], str] = generate_reference_id,
    ):
        self._client = collection_client
        self._new_reference = reference_factory

    async def initiate_payment(self, request: PaymentRequest) -> PaymentSubmissionResponse:
        """
        Submit a request-to-pay to the provider.

        Args:
            request: The caller's payment request

        Returns:
            PaymentSubmissionResponse with the locally generated reference

        Raises:
            PaymentValidationException: If required fields are missing
            PaymentSubmissionException: If no access token could be obtained
                or the provider rejects the request
        """
        missing = request.missing_fields()
        if missing:
            record_payment_request("rejected")
            logger.warning("payment_request_invalid", missing_fields=missing)
            raise PaymentValidationException(missing)

        payload = request.to_provider_payload()

        try:
            token = await self._acquire_token(PaymentSubmissionException)
            reference_id = self._new_reference()
            await self._client.request_to_pay(token, reference_id, payload)
        except ProviderException:
            record_payment_request("failed")
            raise

        record_payment_request("submitted")
        logger.info(
            "payment_request_submitted",
            reference_id=reference_id,
            external_id=payload["externalId"],
            amount=payload["amount"],
            currency=payload["currency"],
        )

        # The provider acknowledges with an empty body; the outcome
        # arrives later via status polling or the callback.
        return PaymentSubmissionResponse(reference_id=reference_id)

    async def get_payment_status(self, reference_id: str) -> PaymentStatusResponse:
        """
        Look up a request-to-pay by reference.

        Raises:
            StatusQueryException: If no access token could be obtained
                or the provider lookup fails
        """
        token = await self._acquire_token(StatusQueryException)
        result = await self._client.get_request_to_pay_status(token, reference_id)

        logger.info(
            "payment_status_retrieved",
            reference_id=reference_id,
            status=result.status,
        )

        return PaymentStatusResponse(status=result.status, data=result.data)

    async def get_account_balance(self) -> AccountBalanceResponse:
        """
        Fetch the collection account balance.

        Raises:
            BalanceQueryException: If no access token could be obtained
                or the provider lookup fails
        """
        token = await self._acquire_token(BalanceQueryException)
        balance = await self._client.get_account_balance(token)

        logger.info("account_balance_retrieved")

        return AccountBalanceResponse(balance=balance)

    async def _acquire_token(self, error_cls: Type[ProviderException]) -> AccessToken:
        """
        Fetch a fresh token, failing as the calling operation.

        The provider payload of a token failure is logged; callers only see
        the operation error with "Failed to get access token" as details.
        """
        try:
            return await self._client.get_access_token()
        except TokenAcquisitionException as e:
            logger.error(
                "token_acquisition_failed",
                upstream_status=e.status_code,
                details=e.details,
            )
            raise error_cls(details=e.message, status_code=e.status_code) from e

    async def receive_callback(self, payload: Any) -> CallbackAcknowledgement:
        """Record a provider callback. Any payload is accepted."""
        notification = CallbackNotification(payload=payload)

        record_callback_received()
        logger.info(
            "momo_callback_received",
            reference_id=notification.reference_id,
            payload=notification.payload,
            received_at=notification.received_at.isoformat(),
        )

        return CallbackAcknowledgement()
