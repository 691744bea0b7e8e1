"""External API client implementations."""

from .momo_client import HttpMoMoCollectionClient

__all__ = [
    "HttpMoMoCollectionClient",
]
