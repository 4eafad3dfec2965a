"""Domain value objects for the board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import Field, field_validator

from board.domain.value.common import RootValueObject, ValueObject


class VoteKind(str, Enum):
    """Kind of reaction a user can leave on a post or comment.

    A user holds at most one kind per subject at any time.
    """

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def opposite(self) -> "VoteKind":
        """The kind that is retracted when this one is cast."""
        return VoteKind.DISLIKE if self is VoteKind.LIKE else VoteKind.LIKE


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class Email(RootValueObject[str]):
    """User email address.

    Normalized to lower case without surrounding whitespace so that
    uniqueness checks are case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate email format."""
        v = v.strip().lower()
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        if not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v


class UserName(RootValueObject[str]):
    """Display name chosen at registration."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Name must be 1-50 characters")
        return v


class VoteState(ValueObject):
    """Aggregated vote counts for a subject plus the viewer's own state."""

    like_count: int = Field(default=0, ge=0)
    dislike_count: int = Field(default=0, ge=0)
    is_liked: bool = False
    is_disliked: bool = False
