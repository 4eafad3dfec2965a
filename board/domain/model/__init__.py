"""Domain model entities for the board."""

from board.domain.model.comment import Comment
from board.domain.model.post import Post, PostPage, PostSummary
from board.domain.model.user import User, UserProfile
from board.domain.model.vote import Vote

__all__ = [
    "User",
    "UserProfile",
    "Post",
    "PostSummary",
    "PostPage",
    "Comment",
    "Vote",
]
