"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.service import CommentService
from board.domain.value import CommentId, PostId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str
    deleted_count: int


class DeleteCommentUseCase:
    """Use case for deleting a comment together with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            ValidationError: If the comment belongs to another post
            NotAuthorizedError: If the user is not the author
        """
        removed = await self.comment_service.delete_comment(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=UserId(UUID(request.user_id)),
        )
        return DeleteCommentResponse(message="Comment deleted", deleted_count=removed)
