"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.comment import Comment
from board.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments of a post as a flat list.

        The tree is assembled by the caller, so no particular order is
        required beyond being deterministic.

        Args:
            post_id: The post ID

        Returns:
            Every comment of the post regardless of depth
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Delete a comment, all of its descendants and their votes.

        Args:
            comment_id: The root comment of the subtree

        Returns:
            Number of comments removed
        """
        pass
