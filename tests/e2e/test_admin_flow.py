"""End-to-end tests for the admin API."""

import pytest

from tests.e2e.api import SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD, auth, register


def _admin_login(client, email: str, password: str):
    return client.post("/api/admin/login", json={"email": email, "password": password})


@pytest.fixture
def root_token(client, super_admin):
    response = _admin_login(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)
    assert response.status_code == 200, response.text
    return response.json()["data"]["token"]


class TestAdminLogin:
    def test_login_returns_token_without_cookie(self, client, super_admin):
        response = _admin_login(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)

        assert response.status_code == 200
        admin = response.json()["data"]["admin"]
        assert admin["role"] == "super_admin"
        assert admin["lastLogin"] is not None
        assert "auth_token" not in response.cookies

    def test_lockout_after_five_failures(self, client, super_admin):
        """The sixth attempt is locked even with the right password."""
        for _ in range(5):
            failed = _admin_login(client, SUPER_ADMIN_EMAIL, "wrong-password")
            assert failed.status_code == 401

        locked = _admin_login(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)

        assert locked.status_code == 423
        assert locked.json()["message"] == (
            "Account temporarily locked due to too many failed login attempts"
        )

    def test_account_token_is_not_an_admin_token(self, client, super_admin):
        user = register(client, "Ada", "ada@example.com")

        response = client.get("/api/admin/dashboard", headers=auth(user["token"]))

        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized, admin token required"


class TestModeration:
    def test_dashboard(self, client, root_token):
        register(client, "Ada", "ada@example.com")

        response = client.get("/api/admin/dashboard", headers=auth(root_token))

        assert response.status_code == 200
        stats = response.json()["data"]["stats"]
        assert stats["totalUsers"] == 1
        assert stats["bannedUsers"] == 0

    def test_ban_blocks_login_and_hides_profile(self, client, root_token):
        user = register(client, "Ada", "ada@example.com")
        user_id = user["user"]["id"]

        banned = client.put(
            f"/api/admin/users/{user_id}",
            headers=auth(root_token),
            json={"isBanned": True, "banReason": "Spam"},
        )
        assert banned.status_code == 200
        assert banned.json()["data"]["isBanned"] is True

        login = client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "secret1"}
        )
        assert login.status_code == 403
        assert login.json()["message"] == "Your account has been banned: Spam"

        assert client.get(f"/api/users/{user_id}").status_code == 404

        banned_list = client.get(
            "/api/admin/users", headers=auth(root_token), params={"status": "banned"}
        ).json()["data"]
        assert [u["id"] for u in banned_list["users"]] == [user_id]

    def test_broadcast_to_all(self, client, root_token):
        ada = register(client, "Ada", "ada@example.com")
        register(client, "Bob", "bob@example.com")

        response = client.post(
            "/api/admin/notifications",
            headers=auth(root_token),
            json={"title": "Welcome", "message": "Thanks for joining", "sendToAll": True},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Notification sent to 2 users"
        notifications = client.get(
            "/api/notifications", headers=auth(ada["token"])
        ).json()["data"]["notifications"]
        assert notifications[0]["type"] == "admin_message"
        assert notifications[0]["data"] == {"adminMessage": True}

    def test_broadcast_rejects_malformed_user_ids(self, client, root_token):
        response = client.post(
            "/api/admin/notifications",
            headers=auth(root_token),
            json={"title": "Hi", "message": "Hello", "userIds": ["xyz"]},
        )

        assert response.status_code == 400
        assert response.json()["message"].startswith("userIds.0:")

    def test_users_report(self, client, root_token):
        register(client, "Ada", "ada@example.com")

        response = client.get("/api/admin/reports/users", headers=auth(root_token))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["rows"][0]["email"] == "ada@example.com"


class TestAdminManagement:
    def test_moderator_permissions_are_enforced(self, client, root_token):
        created = client.post(
            "/api/admin/admins",
            headers=auth(root_token),
            json={
                "name": "Mod",
                "email": "mod@example.com",
                "password": "modpass",
                "role": "moderator",
            },
        )
        assert created.status_code == 201
        assert "manage_users" not in created.json()["data"]["permissions"]

        mod_token = _admin_login(client, "mod@example.com", "modpass").json()["data"][
            "token"
        ]

        assert (
            client.get("/api/admin/analytics", headers=auth(mod_token)).status_code
            == 200
        )
        forbidden = client.get("/api/admin/users", headers=auth(mod_token))
        assert forbidden.status_code == 403
        assert forbidden.json()["message"] == "Insufficient permissions"

    def test_super_admin_cannot_be_created_or_deleted(self, client, root_token, super_admin):
        created = client.post(
            "/api/admin/admins",
            headers=auth(root_token),
            json={
                "name": "Another Root",
                "email": "root2@example.com",
                "password": "rootpass",
                "role": "super_admin",
            },
        )
        assert created.status_code == 400

        deleted = client.delete(
            f"/api/admin/admins/{super_admin.id}", headers=auth(root_token)
        )
        assert deleted.status_code == 400
        assert deleted.json()["message"] == "Cannot delete super admin"
