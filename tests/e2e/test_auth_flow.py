"""End-to-end tests for account authentication."""

from tests.e2e.api import auth, register


class TestAuthFlow:
    """Register, log in, and read the current user."""

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "test"

    def test_register_sets_cookie_and_returns_profile(self, client):
        """Should create the account, set the cookie and return a camelCase profile."""
        # Act
        response = client.post(
            "/api/auth/register",
            json={"name": "Ada", "email": "Ada@Example.com", "password": "secret1"},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        assert body["data"]["user"]["email"] == "ada@example.com"
        assert body["data"]["user"]["skillsOffered"] == []
        assert body["data"]["user"]["averageRating"] == 0.0
        assert "auth_token" in response.cookies

        # Cookie alone authenticates the follow-up call
        me = client.get("/api/auth/me")
        assert me.status_code == 200
        assert me.json()["data"]["name"] == "Ada"

    def test_duplicate_email(self, client):
        register(client, "Ada", "ada@example.com")

        response = client.post(
            "/api/auth/register",
            json={"name": "Ada 2", "email": "ada@example.com", "password": "secret1"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "User already exists with this email",
            "data": None,
        }

    def test_short_password_is_rejected(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "Ada", "email": "ada@example.com", "password": "123"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "password" in response.json()["message"]

    def test_login_and_bearer_token(self, client):
        register(client, "Ada", "ada@example.com")

        response = client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "secret1"}
        )
        token = response.json()["data"]["token"]
        client.cookies.clear()

        assert response.status_code == 200
        assert client.get("/api/auth/me", headers=auth(token)).status_code == 200

    def test_wrong_password(self, client):
        register(client, "Ada", "ada@example.com")

        response = client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "wrong!"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_me_without_token(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized, no token"

    def test_logout_clears_cookie(self, client):
        client.post(
            "/api/auth/register",
            json={"name": "Ada", "email": "ada@example.com", "password": "secret1"},
        )

        response = client.post("/api/auth/logout")

        assert response.status_code == 200
        assert client.get("/api/auth/me").status_code == 401
