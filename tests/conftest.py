"""
Shared fixtures and fakes.

Provides:
- FakeCollectionClient: in-memory CollectionClient that records calls
- MoMo provider stub built on httpx.MockTransport
- Test credentials
"""

import json
from typing import Any, Callable, List

import httpx
import pytest

from src.domain.entities import AccessToken, PaymentStatusResult, ProviderCredentials
from src.domain.exceptions import (
    BalanceQueryException,
    PaymentSubmissionException,
    StatusQueryException,
    TokenAcquisitionException,
)
from src.domain.interfaces import CollectionClient


BASE_URL = "https://momo.test"
TEST_TOKEN = "test-access-token"


# =============================================================================
# Fake Client
# =============================================================================

class FakeCollectionClient(CollectionClient):
    """CollectionClient double that records every call it receives."""

    def __init__(
        self,
        fail_token: bool = False,
        fail_submission: bool = False,
        fail_status: bool = False,
        fail_balance: bool = False,
        status_payload: Any = None,
        balance_payload: Any = None,
    ):
        self.fail_token = fail_token
        self.fail_submission = fail_submission
        self.fail_status = fail_status
        self.fail_balance = fail_balance
        self.status_payload = status_payload or {
            "amount": "500",
            "currency": "EUR",
            "externalId": "ext-1",
            "payer": {"partyIdType": "MSISDN", "partyId": "46733123450"},
            "status": "SUCCESSFUL",
            "financialTransactionId": "1234567",
        }
        self.balance_payload = balance_payload or {
            "availableBalance": "1000",
            "currency": "EUR",
        }
        self.calls: List[str] = []
        self.submissions: List[dict] = []

    @property
    def domain_calls(self) -> List[str]:
        return [call for call in self.calls if call != "token"]

    async def get_access_token(self) -> AccessToken:
        self.calls.append("token")
        if self.fail_token:
            raise TokenAcquisitionException(
                details={"error": "invalid_client"},
                status_code=401,
            )
        return AccessToken(access_token=TEST_TOKEN, expires_in=3600)

    async def request_to_pay(self, token, reference_id, payload) -> None:
        self.calls.append("request_to_pay")
        if self.fail_submission:
            raise PaymentSubmissionException(
                details={"code": "PAYER_NOT_FOUND", "message": "Payer not found"},
                status_code=404,
            )
        self.submissions.append({
            "token": token.access_token,
            "reference_id": reference_id,
            "payload": payload,
        })

    async def get_request_to_pay_status(self, token, reference_id) -> PaymentStatusResult:
        self.calls.append("request_to_pay_status")
        if self.fail_status:
            raise StatusQueryException(
                details={"code": "RESOURCE_NOT_FOUND"},
                status_code=404,
            )
        return PaymentStatusResult.from_response(self.status_payload)

    async def get_account_balance(self, token) -> Any:
        self.calls.append("account_balance")
        if self.fail_balance:
            raise BalanceQueryException(details="Request failed with status code 500")
        return self.balance_payload


# =============================================================================
# Provider Stub
# =============================================================================

def make_provider_stub(
    routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] | None = None,
) -> tuple[httpx.MockTransport, List[httpx.Request]]:
    """
    Build a MockTransport that answers like the MoMo sandbox.

    ``routes`` overrides the default handler for ``(method, path)`` pairs.
    Returns the transport and the list of requests it has seen.
    """
    seen: List[httpx.Request] = []

    defaults = {
        ("POST", "/collection/token/"): lambda request: httpx.Response(
            200,
            json={
                "access_token": TEST_TOKEN,
                "token_type": "access_token",
                "expires_in": 3600,
            },
        ),
        ("POST", "/collection/v1_0/requesttopay"): lambda request: httpx.Response(202),
        ("GET", "/collection/v1_0/account/balance"): lambda request: httpx.Response(
            200,
            json={"availableBalance": "1000", "currency": "EUR"},
        ),
    }
    defaults.update(routes or {})

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        key = (request.method, request.url.path)
        if key in defaults:
            return defaults[key](request)
        if request.method == "GET" and request.url.path.startswith(
            "/collection/v1_0/requesttopay/"
        ):
            reference_id = request.url.path.rsplit("/", 1)[-1]
            return httpx.Response(
                200,
                json={
                    "amount": "500",
                    "currency": "EUR",
                    "externalId": "ext-1",
                    "referenceId": reference_id,
                    "status": "PENDING",
                },
            )
        return httpx.Response(404, json={"code": "RESOURCE_NOT_FOUND"})

    return httpx.MockTransport(handler), seen


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def credentials() -> ProviderCredentials:
    return ProviderCredentials(
        user_id="user-123",
        api_key="key-456",
        subscription_key="sub-789",
        base_url=BASE_URL,
        target_environment="sandbox",
        callback_url="https://example.test/callback",
    )


@pytest.fixture
def fake_client() -> FakeCollectionClient:
    return FakeCollectionClient()


@pytest.fixture
def valid_payment_body() -> dict:
    """Request body for a complete request-to-pay."""
    return {
        "amount": "500",
        "currency": "EUR",
        "externalId": "ext-1",
        "payer": {"partyId": "46733123450"},
    }
