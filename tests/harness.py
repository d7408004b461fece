"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is already running and reachable via
``DATABASE__URL``.
"""

import pytest_asyncio

from skillswap.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_swap(unit_env):
            service = await unit_env.get(SwapService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _test_environment
