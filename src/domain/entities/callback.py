"""CallbackNotification entity for provider push notifications."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class CallbackNotification:
    """
    A payment-result notification pushed by the provider.

    The payload is opaque: it is recorded as received and never
    correlated with an earlier request.
    """

    payload: Any
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def reference_id(self) -> str | None:
        if isinstance(self.payload, dict):
            return self.payload.get("referenceId") or self.payload.get("externalId")
        return None
