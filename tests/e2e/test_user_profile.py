"""End-to-end tests for public user profiles."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from board.interface.api.app import create_app
from tests.conftest import sign_up
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


class TestUserProfileEndpoint:
    """End-to-end tests for GET /users/{id}."""

    def test_profile_counts_activity(self, client):
        """The profile should reflect posts, comments and likes received."""
        # Arrange
        alice = sign_up(client, "alice")
        bob = sign_up(client, "bob")
        post_id = client.post(
            "/posts", json={"title": "Hi", "content": "there"}, headers=alice["headers"]
        ).json()["post_id"]
        client.post(
            f"/posts/{post_id}/comments",
            json={"content": "welcome"},
            headers=alice["headers"],
        )
        client.post(f"/posts/{post_id}/like", headers=bob["headers"])

        # Act
        response = client.get(f"/users/{alice['user_id']}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "alice"
        assert data["post_count"] == 1
        assert data["comment_count"] == 1
        assert data["likes_received"] == 1
        assert data["recent_posts"][0]["post_id"] == post_id
        assert data["recent_posts"][0]["comment_count"] == 1
        assert "email" not in data

    def test_unknown_user(self, client):
        """Unknown users should return 404."""
        response = client.get(f"/users/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
