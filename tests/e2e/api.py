"""Helpers for driving the HTTP API in end-to-end tests."""

from fastapi.testclient import TestClient

SUPER_ADMIN_EMAIL = "root@skillswap.test"
SUPER_ADMIN_PASSWORD = "super-secret"


def register(client: TestClient, name: str, email: str, password: str = "secret1") -> dict:
    """Register an account and return ``{"token", "user"}``.

    The cookie set by the API is dropped so every later call picks its
    caller explicitly through ``auth(token)``.
    """
    response = client.post(
        "/api/auth/register", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201, response.text
    client.cookies.clear()
    return response.json()["data"]


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
