"""Test configuration and shared helpers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
from fastapi.testclient import TestClient

from board.domain.model import Comment, Post, User
from board.domain.value import CommentId, Email, PostId, UserId, UserName

# Spans and events stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """A fixed timestamp offset from a common base, for ordering tests."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(name: str = "alice", email: str | None = None) -> User:
    """Build a user without going through registration."""
    return User(
        id=UserId(uuid4()),
        email=Email(email or f"{name}@example.com"),
        name=UserName(name),
        password_hash="not-a-real-hash",
    )


def make_post(
    author: User,
    title: str = "Test Post",
    content: str = "Test content",
    created_at: datetime | None = None,
) -> Post:
    """Build a post written by ``author``."""
    created_at = created_at or BASE_TIME
    return Post(
        id=PostId(uuid4()),
        title=title,
        content=content,
        author_id=author.id,
        author_name=author.name,
        created_at=created_at,
        updated_at=created_at,
    )


def make_comment(
    post: Post,
    author: User,
    content: str = "Test comment",
    parent: Comment | None = None,
    created_at: datetime | None = None,
) -> Comment:
    """Build a comment on ``post``, optionally replying to ``parent``."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post.id,
        author_id=author.id,
        author_name=author.name,
        content=content,
        parent_id=parent.id if parent else None,
        depth=parent.depth + 1 if parent else 0,
        created_at=created_at or BASE_TIME,
    )


def sign_up(
    client: TestClient,
    name: str,
    email: str | None = None,
    password: str = "correct horse battery staple",
) -> dict:
    """Register and log in through the API.

    The session cookie is moved into a Bearer header and cleared from the
    client, so several users can act through one client.

    Returns:
        ``{"user_id": ..., "headers": {...}}`` for the new user
    """
    email = email or f"{name}@example.com"
    response = client.post(
        "/auth/register", json={"email": email, "name": name, "password": password}
    )
    assert response.status_code == 201, response.text

    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    token = response.cookies["auth_token"]
    client.cookies.clear()

    return {
        "user_id": response.json()["user_id"],
        "headers": {"Authorization": f"Bearer {token}"},
    }
