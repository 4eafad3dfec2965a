"""Comment domain service."""

from dataclasses import dataclass
from uuid import uuid4

import logfire

from board.domain.error import (
    InvalidReferenceError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from board.domain.model.comment import CONTENT_MAX_LENGTH, Comment
from board.domain.repository import CommentRepository, PostRepository
from board.domain.value import CommentId, PostId, UserId, UserName, VotableType

from .base import Service
from .comment_tree import (
    MAX_TREE_DEPTH,
    CommentNode,
    build_comment_tree,
    count_nodes,
)
from .vote_service import VoteService


@dataclass
class CommentTree:
    """Nested comments of a post with the flat comment count."""

    roots: list[CommentNode]
    total_count: int


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        vote_service: VoteService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository, used for existence checks
            vote_service: Vote service, used for per-comment vote aggregation
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.vote_service = vote_service

    async def list_tree(
        self, post_id: PostId, viewer_id: UserId | None = None
    ) -> CommentTree:
        """Build the comment tree of a post.

        All comments are fetched in one query and nested in memory. Top-level
        comments are oldest first, replies newest first, and only the first
        ten levels are expanded.

        Args:
            post_id: Post ID
            viewer_id: User whose own votes are reported, None for anonymous

        Returns:
            Tree roots and the total number of comments on the post

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("comment_service.list_tree", post_id=str(post_id)):
            if not await self.post_repository.find_by_id(post_id):
                logfire.warn("Comment tree for missing post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            comments = await self.comment_repository.find_by_post(post_id)
            vote_states = await self.vote_service.get_vote_states(
                VotableType.COMMENT, [c.id for c in comments], viewer_id
            )
            roots = build_comment_tree(comments, vote_states, MAX_TREE_DEPTH)

            logfire.info(
                "Comment tree built",
                post_id=str(post_id),
                total_count=len(comments),
                root_count=len(roots),
                expanded_count=count_nodes(roots),
            )
            return CommentTree(roots=roots, total_count=len(comments))

    async def add_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        author_name: UserName,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            author_name: Author display name
            content: Comment text, trimmed before storage
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            The created comment

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the post does not exist
            InvalidReferenceError: If the parent is missing or on another post
        """
        with logfire.span(
            "comment_service.add_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = (content or "").strip()
            if not text:
                raise ValidationError("Content is required")
            if len(text) > CONTENT_MAX_LENGTH:
                raise ValidationError(
                    f"Content must be at most {CONTENT_MAX_LENGTH} characters"
                )

            if not await self.post_repository.find_by_id(post_id):
                logfire.warn("Comment on missing post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                        parent_post_id=str(parent.post_id) if parent else None,
                    )
                    raise InvalidReferenceError("Parent comment not found")
                depth = parent.depth + 1

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                author_name=author_name,
                content=text,
                parent_id=parent_id,
                depth=depth,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def delete_comment(
        self, post_id: PostId, comment_id: CommentId, requester_id: UserId
    ) -> int:
        """Delete a comment with all of its replies and their votes.

        Every check runs before anything is removed.

        Args:
            post_id: Post the comment is addressed under
            comment_id: Comment ID
            requester_id: User requesting the deletion

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If the comment does not exist
            ValidationError: If the comment belongs to another post
            NotAuthorizedError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.post_id != post_id:
                logfire.warn(
                    "Comment does not belong to post",
                    comment_id=str(comment_id),
                    post_id=str(post_id),
                )
                raise ValidationError("Comment does not belong to this post")

            if comment.author_id != requester_id:
                logfire.warn(
                    "Comment deletion by non-author",
                    comment_id=str(comment_id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(requester_id)
                )

            removed = await self.comment_repository.delete_subtree(comment_id)
            logfire.info(
                "Comment deleted", comment_id=str(comment_id), removed=removed
            )
            return removed
