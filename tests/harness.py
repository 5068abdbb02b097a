"""Test harness for unit and API tests.

Everything runs against the in-memory persistence component, so no
database is needed. Settings are loaded from environment variables.
"""

import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider
from httpx import ASGITransport, AsyncClient

from blogcraft.interface.api.app import create_app
from blogcraft.persistence.repository.inmemory import InMemoryContentStore
from blogcraft.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_list_posts(unit_env):
            store = await unit_env.get(InMemoryContentStore)
            store.add_post(make_post(1, "Hello"))
            service = await unit_env.get(PostService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


class ApiHarness:
    """HTTP client against the app plus the dataset behind it."""

    def __init__(self, client: AsyncClient, store: InMemoryContentStore) -> None:
        self.client = client
        self.store = store


def create_api_fixture():
    """Factory for fixtures that serve the app over httpx's ASGI transport.

    Background tasks finish before the client returns the response, so
    their effects can be asserted right after the call.
    """

    @pytest_asyncio.fixture
    async def _api():
        container = build_test_container(None, FastapiProvider())
        app = create_app(container)
        store = await container.get(InMemoryContentStore)

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            yield ApiHarness(client, store)

        await container.close()

    return _api
