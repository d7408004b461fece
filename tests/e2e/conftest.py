"""Fixtures for end-to-end tests against the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from skillswap.domain.service import AdminService
from skillswap.domain.value import EmailAddress
from skillswap.interface.api.app import create_app
from tests.di import build_test_container
from tests.e2e.api import SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD


@pytest.fixture
def container():
    """Fresh all-mock container, so state never leaks between tests."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Test client over an app wired to the test container."""
    with TestClient(create_app(container=container)) as test_client:
        yield test_client


@pytest.fixture
def super_admin(client, container):
    """Seed a super admin through the domain service."""

    async def seed():
        async with container() as request_container:
            admin_service = await request_container.get(AdminService)
            return await admin_service.create_super_admin(
                "Root", EmailAddress(SUPER_ADMIN_EMAIL), SUPER_ADMIN_PASSWORD
            )

    # Run on the client's event loop so app-scoped objects share one loop
    return client.portal.call(seed)
