"""End-to-end tests for the swap lifecycle and feedback."""

import pytest

from tests.e2e.api import auth, register


@pytest.fixture
def parties(client):
    """Two public accounts with complementary skills."""
    alice = register(client, "Alice", "alice@example.com")
    bob = register(client, "Bob", "bob@example.com")
    client.put(
        "/api/users/me",
        headers=auth(bob["token"]),
        json={"skillsOffered": ["Spanish"], "skillsWanted": ["Guitar"]},
    )
    return alice, bob


def _propose(client, requester: dict, recipient: dict):
    return client.post(
        "/api/swaps",
        headers=auth(requester["token"]),
        json={
            "toUserId": recipient["user"]["id"],
            "skillsOffered": ["Guitar"],
            "skillsRequested": ["Spanish"],
            "message": "Guitar lessons for Spanish practice?",
        },
    )


class TestSwapLifecycle:
    """Create, answer and complete swaps over HTTP."""

    def test_full_flow_through_feedback(self, client, parties):
        """Should run propose -> accept -> complete -> rate end to end."""
        alice, bob = parties

        # Alice proposes
        created = _propose(client, alice, bob)
        assert created.status_code == 201
        swap = created.json()["data"]
        assert swap["status"] == "pending"
        assert swap["fromUser"]["name"] == "Alice"
        assert swap["toUser"]["name"] == "Bob"

        # Bob sees it in his inbox and accepts
        inbox = client.get("/api/swaps/inbox", headers=auth(bob["token"])).json()
        assert [s["id"] for s in inbox["data"]["swaps"]] == [swap["id"]]

        accepted = client.put(
            f"/api/swaps/{swap['id']}/accept", headers=auth(bob["token"])
        )
        assert accepted.status_code == 200
        assert accepted.json()["message"] == "Swap request accepted"
        assert accepted.json()["data"]["acceptedAt"] is not None

        # Either party completes
        completed = client.put(
            f"/api/swaps/{swap['id']}/complete", headers=auth(alice["token"])
        )
        assert completed.json()["data"]["status"] == "completed"

        # Alice owes feedback until she leaves it
        pending = client.get("/api/feedback/pending", headers=auth(alice["token"]))
        assert len(pending.json()["data"]["swaps"]) == 1

        feedback = client.post(
            "/api/feedback",
            headers=auth(alice["token"]),
            json={"swapId": swap["id"], "stars": 5, "comment": "Great guitarist"},
        )
        assert feedback.status_code == 201
        assert feedback.json()["data"]["fromName"] == "Alice"

        pending = client.get("/api/feedback/pending", headers=auth(alice["token"]))
        assert pending.json()["data"]["swaps"] == []

        # Bob's public profile reflects the rating
        profile = client.get(f"/api/users/{bob['user']['id']}").json()["data"]
        assert profile["averageRating"] == 5.0
        assert profile["ratingCount"] == 1
        assert profile["recentFeedback"][0]["comment"] == "Great guitarist"
        assert "email" not in profile

        # Bob was told about the request and the feedback
        notifications = client.get(
            "/api/notifications", headers=auth(bob["token"])
        ).json()["data"]
        types = {n["type"] for n in notifications["notifications"]}
        assert {"swap_request", "swap_completed", "feedback_received"} <= types

    def test_duplicate_pending_request(self, client, parties):
        alice, bob = parties
        _propose(client, alice, bob)

        response = _propose(client, alice, bob)

        assert response.status_code == 400
        assert response.json()["message"] == (
            "You already have a pending swap request with this user"
        )

    def test_swap_with_self(self, client, parties):
        alice, _ = parties

        response = _propose(client, alice, alice)

        assert response.status_code == 400
        assert response.json()["message"] == "Cannot send swap request to yourself"

    def test_requester_cannot_accept(self, client, parties):
        alice, bob = parties
        swap = _propose(client, alice, bob).json()["data"]

        response = client.put(
            f"/api/swaps/{swap['id']}/accept", headers=auth(alice["token"])
        )

        assert response.status_code == 403

    def test_reject_with_reason(self, client, parties):
        alice, bob = parties
        swap = _propose(client, alice, bob).json()["data"]

        response = client.put(
            f"/api/swaps/{swap['id']}/reject",
            headers=auth(bob["token"]),
            json={"reason": "Fully booked"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "rejected"
        notifications = client.get(
            "/api/notifications",
            headers=auth(alice["token"]),
            params={"type": "swap_rejected"},
        ).json()["data"]["notifications"]
        assert notifications[0]["message"] == (
            "Bob rejected your swap request: Fully booked"
        )

    def test_feedback_before_completion(self, client, parties):
        alice, bob = parties
        swap = _propose(client, alice, bob).json()["data"]

        response = client.post(
            "/api/feedback",
            headers=auth(alice["token"]),
            json={"swapId": swap["id"], "stars": 4, "comment": "Too early"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Can only leave feedback for completed swaps"

    def test_stats_and_delete(self, client, parties):
        alice, bob = parties
        swap = _propose(client, alice, bob).json()["data"]

        stats = client.get("/api/swaps/stats", headers=auth(alice["token"])).json()
        assert stats["data"]["pending"] == 1

        deleted = client.delete(f"/api/swaps/{swap['id']}", headers=auth(alice["token"]))
        assert deleted.status_code == 200

        missing = client.get(f"/api/swaps/{swap['id']}", headers=auth(alice["token"]))
        assert missing.status_code == 404

    def test_swap_with_unknown_user(self, client, parties):
        alice, _ = parties

        response = client.post(
            "/api/swaps",
            headers=auth(alice["token"]),
            json={
                "toUserId": "00000000-0000-4000-8000-000000000000",
                "skillsOffered": ["Guitar"],
                "skillsRequested": ["Spanish"],
                "message": "Anyone there?",
            },
        )

        assert response.status_code == 404


class TestDirectory:
    def test_search_by_skill(self, client, parties):
        alice, bob = parties

        response = client.get(
            "/api/users/search",
            headers=auth(alice["token"]),
            params={"skillsOffered": "spanish"},
        )

        assert response.status_code == 200
        users = response.json()["data"]["users"]
        assert [u["name"] for u in users] == ["Bob"]


class TestMalformedIds:
    """Ids in request bodies are checked before any lookup."""

    def test_swap_target_must_be_a_uuid(self, client, parties):
        alice, _ = parties

        response = client.post(
            "/api/swaps",
            headers=auth(alice["token"]),
            json={
                "toUserId": "not-a-uuid",
                "skillsOffered": ["Guitar"],
                "skillsRequested": ["Spanish"],
                "message": "Swap?",
            },
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["message"].startswith("toUserId:")

    def test_feedback_swap_id_must_be_a_uuid(self, client, parties):
        alice, _ = parties

        response = client.post(
            "/api/feedback",
            headers=auth(alice["token"]),
            json={"swapId": "xyz", "stars": 5, "comment": "Great"},
        )

        assert response.status_code == 400
        assert response.json()["message"].startswith("swapId:")


class TestOwnFeedback:
    def test_private_account_reads_its_own_feedback(self, client, parties):
        # Arrange
        alice, bob = parties
        swap = _propose(client, alice, bob).json()["data"]
        client.put(f"/api/swaps/{swap['id']}/accept", headers=auth(bob["token"]))
        client.put(f"/api/swaps/{swap['id']}/complete", headers=auth(bob["token"]))
        client.post(
            "/api/feedback",
            headers=auth(alice["token"]),
            json={"swapId": swap["id"], "stars": 4, "comment": "Good lesson"},
        )
        client.put(
            "/api/users/me", headers=auth(bob["token"]), json={"isPublic": False}
        )

        # Act
        response = client.get("/api/users/me/feedback", headers=auth(bob["token"]))

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert [entry["comment"] for entry in data["feedback"]] == ["Good lesson"]
        assert data["averageRating"] == 4.0
        assert data["totalRatings"] == 1

    def test_requires_login(self, client):
        assert client.get("/api/users/me/feedback").status_code == 401
