"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app with the MoMo client overridden
- Clients wired to failing MoMo doubles
- A client wired to the real HTTP client over a stubbed provider
"""

from typing import AsyncGenerator, List

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from src.main import app
from src.core.dependencies import get_collection_client
from src.domain.interfaces import CollectionClient
from src.infrastructure.clients import HttpMoMoCollectionClient
from tests.conftest import FakeCollectionClient, make_provider_stub


async def _client_for(
    collection_client: CollectionClient,
    raise_app_exceptions: bool = True,
) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_collection_client] = lambda: collection_client

    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(
    fake_client: FakeCollectionClient,
) -> AsyncGenerator[AsyncClient, None]:
    """Test client backed by a well-behaved fake MoMo client."""
    async for ac in _client_for(fake_client):
        yield ac


@pytest.fixture
def failing_token_client() -> FakeCollectionClient:
    return FakeCollectionClient(fail_token=True)


@pytest_asyncio.fixture
async def client_with_failing_token(
    failing_token_client: FakeCollectionClient,
) -> AsyncGenerator[AsyncClient, None]:
    """Test client where token acquisition always fails."""
    async for ac in _client_for(failing_token_client):
        yield ac


@pytest.fixture
def failing_provider_client() -> FakeCollectionClient:
    return FakeCollectionClient(
        fail_submission=True,
        fail_status=True,
        fail_balance=True,
    )


@pytest_asyncio.fixture
async def client_with_failing_provider(
    failing_provider_client: FakeCollectionClient,
) -> AsyncGenerator[AsyncClient, None]:
    """Test client where every domain call to MoMo fails."""
    async for ac in _client_for(failing_provider_client):
        yield ac


@pytest.fixture
def provider_stub():
    """MockTransport answering like the MoMo sandbox, plus its request log."""
    return make_provider_stub()


@pytest_asyncio.fixture
async def stubbed_client(
    credentials,
    provider_stub,
) -> AsyncGenerator[AsyncClient, None]:
    """Test client using the real HTTP client against the provider stub."""
    transport, _ = provider_stub
    http_client = HttpMoMoCollectionClient(
        credentials=credentials,
        timeout=5.0,
        transport=transport,
    )
    async for ac in _client_for(http_client):
        yield ac


@pytest.fixture
def provider_requests(provider_stub) -> List[httpx.Request]:
    _, seen = provider_stub
    return seen
