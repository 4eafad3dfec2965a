"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.domain.service import CommentNode, CommentService
from board.domain.value import PostId, UserId


class CommentItem(BaseModel):
    """Comment node in response, with its expanded replies."""

    comment_id: str
    post_id: str
    author_id: str
    author_name: str
    content: str
    parent_id: str | None
    depth: int
    created_at: datetime
    like_count: int
    dislike_count: int
    is_liked: bool
    is_disliked: bool
    replies: list["CommentItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        """Convert a tree node and its replies to response items."""
        comment = node.comment
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_name=comment.author_name.root,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            created_at=comment.created_at,
            like_count=node.vote_state.like_count,
            dislike_count=node.vote_state.dislike_count,
            is_liked=node.vote_state.is_liked,
            is_disliked=node.vote_state.is_disliked,
            replies=[cls.from_node(reply) for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    viewer_id: str | None = None  # User ID if authenticated


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total_count: int


class GetCommentsUseCase:
    """Use case for getting the comment tree of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Top-level comments come oldest first and replies newest first.
        ``total_count`` counts every comment of the post, including those
        nested too deep to be expanded.

        Args:
            request: Get comments request with post ID and optional viewer

        Returns:
            Comment tree with vote state

        Raises:
            NotFoundError: If the post does not exist
        """
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        tree = await self.comment_service.list_tree(
            PostId(UUID(request.post_id)), viewer_id
        )

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[CommentItem.from_node(node) for node in tree.roots],
            total_count=tree.total_count,
        )
