"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.service import CommentNode, CommentService, UserService
from board.domain.value import CommentId, PostId, UserId

from .get_comments import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str | None = None
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Load the author (the name is copied onto the comment)
        2. Create comment via comment service (validates post and parent)

        Args:
            request: Create comment request

        Returns:
            The created comment with no replies and no votes

        Raises:
            ValidationError: If content is empty
            NotFoundError: If the post does not exist
            InvalidReferenceError: If the parent is missing or on another post
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        comment = await self.comment_service.add_comment(
            post_id=PostId(UUID(request.post_id)),
            author_id=author.id,
            author_name=author.name,
            content=request.content or "",
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )

        return CommentItem.from_node(CommentNode(comment=comment))
