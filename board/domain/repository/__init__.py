"""Repository interfaces for the board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from board.domain.repository.comment import CommentRepository
from board.domain.repository.post import PostRepository, PostSortOrder
from board.domain.repository.user import UserRepository
from board.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "PostSortOrder",
    "CommentRepository",
    "VoteRepository",
]
