"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.service import PostService
from board.domain.value import PostId, UserId

from .list_posts import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    title: str | None = None
    content: str | None = None


class UpdatePostUseCase:
    """Use case for editing a post's title and content."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            Updated post with current counts

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If title or content is empty or too long
        """
        post_id = PostId(UUID(request.post_id))

        await self.post_service.update_post(
            post_id=post_id,
            requester_id=UserId(UUID(request.user_id)),
            title=request.title or "",
            content=request.content or "",
        )
        summary = await self.post_service.get_post_summary(post_id)
        return PostItem.from_summary(summary)
