"""HTTP implementation of the MoMo CollectionClient."""

from typing import Any, Type

import httpx
import structlog

from src.core.metrics import (
    record_provider_failure,
    record_provider_success,
    track_provider_latency,
)
from src.domain.entities import AccessToken, PaymentStatusResult, ProviderCredentials
from src.domain.exceptions import (
    BalanceQueryException,
    PaymentSubmissionException,
    ProviderException,
    StatusQueryException,
    TokenAcquisitionException,
)
from src.domain.interfaces import CollectionClient

logger = structlog.get_logger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"
TARGET_ENVIRONMENT_HEADER = "X-Target-Environment"
REFERENCE_ID_HEADER = "X-Reference-Id"
CALLBACK_URL_HEADER = "X-Callback-Url"

TOKEN_PATH = "/collection/token/"
REQUEST_TO_PAY_PATH = "/collection/v1_0/requesttopay"
BALANCE_PATH = "/collection/v1_0/account/balance"


class HttpMoMoCollectionClient(CollectionClient):
    """
    HTTP client for the MoMo Collection API.

    Every call opens its own ``httpx.AsyncClient``; failures are raised
    immediately without retry.
    """

    def __init__(
        self,
        credentials: ProviderCredentials,
        timeout: float = 30.0,
        send_callback_url: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._credentials = credentials
        self._base_url = credentials.base_url.rstrip("/")
        self._timeout = timeout
        self._send_callback_url = send_callback_url
        self._transport = transport

    async def get_access_token(self) -> AccessToken:
        headers = {
            "Authorization": self._credentials.basic_auth_header,
            SUBSCRIPTION_KEY_HEADER: self._credentials.subscription_key,
        }
        response = await self._send(
            "token",
            "POST",
            TOKEN_PATH,
            headers=headers,
            json={},
            error_cls=TokenAcquisitionException,
        )

        try:
            token = AccessToken.from_response(response.json())
        except (ValueError, KeyError, TypeError, AttributeError):
            logger.error(
                "token_acquisition_failed",
                status_code=response.status_code,
                details="missing access_token",
            )
            raise TokenAcquisitionException(
                details="Token response did not contain an access_token",
                status_code=response.status_code,
            )

        logger.debug("token_acquired", expires_in=token.expires_in)
        return token

    async def request_to_pay(
        self,
        token: AccessToken,
        reference_id: str,
        payload: dict[str, Any],
    ) -> None:
        headers = self._domain_headers(token)
        headers[REFERENCE_ID_HEADER] = reference_id
        headers["Content-Type"] = "application/json"
        if self._send_callback_url and self._credentials.callback_url:
            headers[CALLBACK_URL_HEADER] = self._credentials.callback_url

        response = await self._send(
            "request_to_pay",
            "POST",
            REQUEST_TO_PAY_PATH,
            headers=headers,
            json=payload,
            error_cls=PaymentSubmissionException,
        )

        logger.info(
            "request_to_pay_accepted",
            reference_id=reference_id,
            status_code=response.status_code,
        )

    async def get_request_to_pay_status(
        self,
        token: AccessToken,
        reference_id: str,
    ) -> PaymentStatusResult:
        response = await self._send(
            "request_to_pay_status",
            "GET",
            f"{REQUEST_TO_PAY_PATH}/{reference_id}",
            headers=self._domain_headers(token),
            error_cls=StatusQueryException,
        )
        data = self._parse_body(response)
        return PaymentStatusResult.from_response(data)

    async def get_account_balance(self, token: AccessToken) -> Any:
        response = await self._send(
            "account_balance",
            "GET",
            BALANCE_PATH,
            headers=self._domain_headers(token),
            error_cls=BalanceQueryException,
        )
        return self._parse_body(response)

    def _domain_headers(self, token: AccessToken) -> dict[str, str]:
        return {
            "Authorization": token.authorization_header,
            TARGET_ENVIRONMENT_HEADER: self._credentials.target_environment,
            SUBSCRIPTION_KEY_HEADER: self._credentials.subscription_key,
        }

    async def _send(
        self,
        operation: str,
        method: str,
        path: str,
        headers: dict[str, str],
        error_cls: Type[ProviderException],
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Issue a single request and raise ``error_cls`` on any failure."""
        url = f"{self._base_url}{path}"

        try:
            with track_provider_latency(operation):
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.request(
                        method,
                        url,
                        headers=headers,
                        json=json,
                    )
        except httpx.HTTPError as e:
            record_provider_failure(operation)
            message = str(e) or type(e).__name__
            logger.error(
                "momo_api_transport_error",
                operation=operation,
                error=message,
                error_type=type(e).__name__,
            )
            raise error_cls(details=message) from e

        if not response.is_success:
            record_provider_failure(operation)
            details = _error_details(response)
            logger.error(
                "momo_api_error",
                operation=operation,
                status_code=response.status_code,
                details=details,
            )
            raise error_cls(details=details, status_code=response.status_code)

        record_provider_success(operation)
        return response

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """Successful body as JSON, or the raw text when it is not JSON."""
        try:
            return response.json()
        except ValueError:
            logger.warning(
                "momo_api_non_json_body",
                status_code=response.status_code,
                body=response.text[:200],
            )
            return response.text


def _error_details(response: httpx.Response) -> Any:
    """Provider error payload: parsed JSON, raw text, or a status summary."""
    try:
        return response.json()
    except ValueError:
        pass

    if response.text:
        return response.text

    return f"Request failed with status code {response.status_code}"
