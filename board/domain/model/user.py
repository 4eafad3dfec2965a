"""User aggregate root.

Users register with an email address and a password and are identified
on the board by their display name.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel, utcnow
from board.domain.model.post import PostSummary
from board.domain.value import Email, UserId, UserName


class User(DomainModel):
    """User aggregate root.

    Immutable after registration. Only the argon2 hash of the password is
    ever stored.
    """

    id: UserId
    email: Email
    name: UserName
    password_hash: str = Field(min_length=1, repr=False)
    created_at: datetime = Field(default_factory=utcnow)


class UserProfile(DomainModel):
    """Public profile of a user with activity statistics."""

    user: User
    post_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    likes_received: int = Field(default=0, ge=0)
    recent_posts: list[PostSummary] = Field(default_factory=list)
