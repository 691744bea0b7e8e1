"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import Any

from src.domain.entities import AccessToken, PaymentStatusResult


class CollectionClient(ABC):
    """
    Abstract client for the MoMo Collection API.

    Every domain call takes the token explicitly so that callers acquire
    a fresh one per invocation.
    """

    @abstractmethod
    async def get_access_token(self) -> AccessToken:
        """
        Obtain a bearer token using Basic auth.

        Raises:
            TokenAcquisitionException: On transport errors, non-success
                responses or a response without an access token
        """
        ...

    @abstractmethod
    async def request_to_pay(
        self,
        token: AccessToken,
        reference_id: str,
        payload: dict[str, Any],
    ) -> None:
        """
        Submit a request-to-pay under the given reference.

        The provider acknowledges with an empty body, so nothing is returned.

        Raises:
            PaymentSubmissionException: If the provider rejects the request
        """
        ...

    @abstractmethod
    async def get_request_to_pay_status(
        self,
        token: AccessToken,
        reference_id: str,
    ) -> PaymentStatusResult:
        """
        Look up the status of a request-to-pay.

        Raises:
            StatusQueryException: If the lookup fails
        """
        ...

    @abstractmethod
    async def get_account_balance(self, token: AccessToken) -> Any:
        """
        Fetch the collection account balance payload.

        Raises:
            BalanceQueryException: If the lookup fails
        """
        ...
