"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.model import PostSummary
from board.domain.service import PostService, UserService
from board.domain.value import UserId

from .list_posts import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str | None = None
    content: str | None = None
    author_id: str  # User ID from authenticated user


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Steps:
        1. Load the author (the name is copied onto the post)
        2. Create post via post service

        Args:
            request: Create post request

        Returns:
            The created post with zero counts

        Raises:
            NotFoundError: If the author no longer exists
            ValidationError: If title or content is empty or too long
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        post = await self.post_service.create_post(
            author=author,
            title=request.title or "",
            content=request.content or "",
        )
        return PostItem.from_summary(PostSummary(post=post))
