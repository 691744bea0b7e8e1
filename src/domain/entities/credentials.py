"""ProviderCredentials entity for the MoMo Collection API."""

import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderCredentials:
    """
    Credentials and addressing for the MoMo Collection API.

    Built once at startup from settings and handed to the HTTP client;
    never mutated afterwards.
    """

    user_id: str
    api_key: str
    subscription_key: str
    base_url: str
    target_environment: str = "sandbox"
    callback_url: str | None = None

    @property
    def basic_auth_header(self) -> str:
        """Authorization header value for the token endpoint."""
        raw = f"{self.user_id}:{self.api_key}".encode("utf-8")
        return f"Basic {base64.b64encode(raw).decode('ascii')}"

    def __repr__(self) -> str:
        return (
            f"ProviderCredentials(user_id={self.user_id!r}, "
            f"base_url={self.base_url!r}, "
            f"target_environment={self.target_environment!r})"
        )
