"""In-memory comment repository for testing."""

from typing import Optional

from board.domain.model import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments of a post, oldest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Delete a comment with every descendant and their votes."""
        ids = self._store.subtree_ids(comment_id)
        self._store.delete_comments(ids)
        return len(ids)
