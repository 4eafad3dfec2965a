"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from board.domain.model.post import Post, PostSummary
from board.domain.value import PostId, UserId


class PostSortOrder(str, Enum):
    """Sort order for post listings."""

    LATEST = "latest"  # Newest first
    OLDEST = "oldest"  # Oldest first
    LIKES = "likes"  # Most liked first
    COMMENTS = "comments"  # Most commented first


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_summary(self, post_id: PostId) -> Optional[PostSummary]:
        """Find a post together with its comment and vote counts.

        Args:
            post_id: The post's unique identifier

        Returns:
            The summary if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(
        self,
        search: Optional[str] = None,
        sort: PostSortOrder = PostSortOrder.LATEST,
        limit: int = 10,
        offset: int = 0,
        liked_only: bool = False,
    ) -> List[PostSummary]:
        """Find a page of posts with their counts.

        Args:
            search: Case-insensitive substring matched against title or content
            sort: Sort order
            limit: Maximum number of posts to return
            offset: Number of posts to skip
            liked_only: Only include posts with at least one like

        Returns:
            List of post summaries
        """
        pass

    @abstractmethod
    async def count(
        self, search: Optional[str] = None, liked_only: bool = False
    ) -> int:
        """Count posts matching the listing filters.

        Args:
            search: Case-insensitive substring matched against title or content
            liked_only: Only count posts with at least one like

        Returns:
            Number of matching posts
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 5
    ) -> List[PostSummary]:
        """Find the most recent posts of an author.

        Args:
            author_id: The author's user ID
            limit: Maximum number of posts to return

        Returns:
            Post summaries, newest first
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts written by an author."""
        pass

    @abstractmethod
    async def count_likes_received(self, author_id: UserId) -> int:
        """Count likes received across all posts of an author."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post with its comments and votes.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass
