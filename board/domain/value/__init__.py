"""Domain value objects for the board."""

from board.domain.value.identifiers import (
    CommentId,
    PostId,
    UserId,
    VoteId,
)
from board.domain.value.types import (
    Email,
    UserName,
    VotableType,
    VoteKind,
    VoteState,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    # Types
    "Email",
    "UserName",
    "VotableType",
    "VoteKind",
    "VoteState",
]
