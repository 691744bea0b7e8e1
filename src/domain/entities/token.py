"""AccessToken entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AccessToken:
    """
    Opaque bearer token issued by the provider's token endpoint.

    Tokens are fetched per outbound call; ``expires_in`` is kept only
    for logging and is not used to cache the token.
    """

    access_token: str
    token_type: str = "access_token"
    expires_in: int | None = None

    @property
    def authorization_header(self) -> str:
        return f"Bearer {self.access_token}"

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "AccessToken":
        if not data.get("access_token"):
            raise KeyError("access_token")
        expires_in = data.get("expires_in")
        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type", "access_token"),
            expires_in=int(expires_in) if expires_in is not None else None,
        )

    def __repr__(self) -> str:
        return f"AccessToken(token_type={self.token_type!r}, expires_in={self.expires_in!r})"
