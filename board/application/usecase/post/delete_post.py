"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.service import PostService
from board.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str


class DeletePostUseCase:
    """Use case for deleting a post with its comments and votes."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user is not the author
        """
        await self.post_service.delete_post(
            post_id=PostId(UUID(request.post_id)),
            requester_id=UserId(UUID(request.user_id)),
        )
        return DeletePostResponse(message="Post deleted")
