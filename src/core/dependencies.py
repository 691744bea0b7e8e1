"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from src.core.config import Settings, get_settings
from src.domain.entities import ProviderCredentials
from src.domain.interfaces import CollectionClient
from src.infrastructure.clients import HttpMoMoCollectionClient
from src.application.services import PaymentService


@lru_cache
def get_provider_credentials() -> ProviderCredentials:
    """Build the immutable MoMo credentials once per process."""
    settings = get_settings()
    return ProviderCredentials(
        user_id=settings.momo_collection_user_id,
        api_key=settings.momo_collection_api_key,
        subscription_key=settings.momo_collection_subscription_key,
        base_url=settings.momo_base_url,
        target_environment=settings.momo_target_environment,
        callback_url=settings.callback_url,
    )


# External client dependencies
def get_collection_client(
    credentials: Annotated[ProviderCredentials, Depends(get_provider_credentials)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CollectionClient:
    """Get a CollectionClient instance."""
    return HttpMoMoCollectionClient(
        credentials=credentials,
        timeout=settings.momo_api_timeout,
        send_callback_url=settings.momo_send_callback_url,
    )


# Service dependencies
def get_payment_service(
    collection_client: Annotated[CollectionClient, Depends(get_collection_client)],
) -> PaymentService:
    """Get a PaymentService instance."""
    return PaymentService(collection_client=collection_client)
