"""End-to-end tests for posts and their likes."""

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


def _create_post(client, user, title="제목", content="내용"):
    response = client.post(
        "/posts", json={"title": title, "content": content}, headers=user["headers"]
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestLikeDislikeScenario:
    """A likes-and-deletion walkthrough across two users."""

    def test_like_dislike_then_delete(self, client):
        """Votes should swap cleanly and vanish with the post."""
        # Arrange
        alice = sign_up(client, "alice")
        bob = sign_up(client, "bob")
        post = _create_post(client, alice)
        post_id = post["post_id"]
        assert post["author_name"] == "alice"

        # Act & Assert - B likes
        response = client.post(f"/posts/{post_id}/like", headers=bob["headers"])
        assert response.status_code == 200
        assert response.json() == {
            "like_count": 1,
            "dislike_count": 0,
            "is_liked": True,
            "is_disliked": False,
        }

        # B dislikes, which replaces the like
        response = client.post(f"/posts/{post_id}/dislike", headers=bob["headers"])
        assert response.json() == {
            "like_count": 0,
            "dislike_count": 1,
            "is_liked": False,
            "is_disliked": True,
        }

        detail = client.get(f"/posts/{post_id}", headers=bob["headers"]).json()
        assert detail["dislike_count"] == 1
        assert detail["is_disliked"] is True
        assert detail["title"] == "제목"
        assert detail["content"] == "내용"

        # A deletes the post
        response = client.delete(f"/posts/{post_id}", headers=alice["headers"])
        assert response.status_code == 200
        assert response.json() == {"message": "Post deleted"}

        response = client.get(f"/posts/{post_id}")
        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

        for kind in ("like", "dislike"):
            response = client.get(f"/posts/{post_id}/{kind}", headers=bob["headers"])
            assert response.status_code == 200
            assert response.json() == {
                "like_count": 0,
                "dislike_count": 0,
                "is_liked": False,
                "is_disliked": False,
            }

    def test_toggle_twice_returns_to_no_vote(self, client):
        """Liking twice should retract the like."""
        alice = sign_up(client, "alice")
        post_id = _create_post(client, alice)["post_id"]

        client.post(f"/posts/{post_id}/like", headers=alice["headers"])
        response = client.post(f"/posts/{post_id}/like", headers=alice["headers"])

        assert response.json()["like_count"] == 0
        assert response.json()["is_liked"] is False

    def test_vote_requires_authentication(self, client):
        """Anonymous votes should be rejected with 401."""
        alice = sign_up(client, "alice")
        post_id = _create_post(client, alice)["post_id"]

        response = client.post(f"/posts/{post_id}/like")

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required to like"}

    def test_vote_on_missing_post(self, client):
        """Votes on unknown posts should return 404."""
        alice = sign_up(client, "alice")

        response = client.post(f"/posts/{uuid4()}/like", headers=alice["headers"])

        assert response.status_code == 404


class TestPostCrud:
    """Tests for creating, editing and deleting posts."""

    def test_create_requires_authentication(self, client):
        """Anonymous posting should be rejected with 401."""
        response = client.post("/posts", json={"title": "t", "content": "c"})

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required to post"}

    def test_create_with_empty_title(self, client):
        """Blank titles should be rejected with 400."""
        alice = sign_up(client, "alice")

        response = client.post(
            "/posts", json={"title": "  ", "content": "c"}, headers=alice["headers"]
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Title is required"}

    def test_update_by_author(self, client):
        """The author should be able to edit their post."""
        alice = sign_up(client, "alice")
        post_id = _create_post(client, alice)["post_id"]

        response = client.put(
            f"/posts/{post_id}",
            json={"title": "Edited", "content": "Still here"},
            headers=alice["headers"],
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Edited"

    def test_update_by_stranger(self, client):
        """Editing another user's post should return 403."""
        alice = sign_up(client, "alice")
        mallory = sign_up(client, "mallory")
        post_id = _create_post(client, alice)["post_id"]

        response = client.put(
            f"/posts/{post_id}",
            json={"title": "Hacked", "content": "x"},
            headers=mallory["headers"],
        )

        assert response.status_code == 403
        assert response.json() == {
            "error": "You do not have permission to modify this post"
        }
        assert client.get(f"/posts/{post_id}").json()["title"] == "제목"

    def test_delete_by_stranger(self, client):
        """Deleting another user's post should return 403."""
        alice = sign_up(client, "alice")
        mallory = sign_up(client, "mallory")
        post_id = _create_post(client, alice)["post_id"]

        response = client.delete(f"/posts/{post_id}", headers=mallory["headers"])

        assert response.status_code == 403
        assert client.get(f"/posts/{post_id}").status_code == 200

    def test_malformed_post_id(self, client):
        """Non-UUID post IDs should return 400 in the error envelope."""
        response = client.get("/posts/not-a-uuid")

        assert response.status_code == 400
        assert "error" in response.json()


class TestListings:
    """Tests for GET /posts, /posts/best and /posts/super-best."""

    def test_list_search_and_paginate(self, client):
        """Listing should support search, sort and pagination."""
        # Arrange
        alice = sign_up(client, "alice")
        for i in range(12):
            title = f"Python tip {i}" if i % 2 else f"Cooking note {i}"
            _create_post(client, alice, title=title, content="body")

        # Act
        first = client.get("/posts", params={"page": 1, "pageSize": 5}).json()
        last = client.get("/posts", params={"page": 3, "pageSize": 5}).json()
        searched = client.get("/posts", params={"search": "PYTHON"}).json()
        oldest = client.get("/posts", params={"sort": "oldest"}).json()

        # Assert
        assert first["total_count"] == 12
        assert first["total_pages"] == 3
        assert first["current_page"] == 1
        assert first["page_size"] == 5
        assert len(first["posts"]) == 5
        assert len(last["posts"]) == 2
        assert searched["total_count"] == 6
        assert all("Python" in p["title"] for p in searched["posts"])
        assert oldest["posts"][0]["title"] == "Cooking note 0"

    def test_unknown_sort_is_rejected(self, client):
        """Unsupported sort values should return 400."""
        response = client.get("/posts", params={"sort": "hot"})

        assert response.status_code == 400

    def test_best_and_super_best(self, client):
        """Only liked posts should be ranked, most likes first."""
        # Arrange
        alice = sign_up(client, "alice")
        voters = [sign_up(client, f"voter{i}") for i in range(3)]
        ids = [
            _create_post(client, alice, title=f"Post {i}")["post_id"] for i in range(7)
        ]
        # Post 0 gets three likes, post 1 two, posts 2-5 one, post 6 none
        likes = {0: 3, 1: 2, 2: 1, 3: 1, 4: 1, 5: 1}
        for index, count in likes.items():
            for voter in voters[:count]:
                client.post(f"/posts/{ids[index]}/like", headers=voter["headers"])

        # Act
        best = client.get("/posts/best").json()
        super_best = client.get("/posts/super-best").json()

        # Assert
        assert best["total_count"] == 6
        assert [p["title"] for p in best["posts"][:2]] == ["Post 0", "Post 1"]
        assert all(p["like_count"] >= 1 for p in best["posts"])
        assert len(super_best["posts"]) == 5
        assert super_best["posts"][0]["like_count"] == 3
        assert "Post 6" not in [p["title"] for p in super_best["posts"]]
