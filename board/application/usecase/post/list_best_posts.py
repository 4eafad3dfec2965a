"""Like leaderboard use cases."""

from pydantic import BaseModel, Field

from board.domain.service import PostService

from .list_posts import ListPostsResponse, PostItem


class ListBestPostsRequest(BaseModel):
    """Best posts request."""

    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    search: str | None = None


class ListBestPostsUseCase:
    """Use case for the paginated like leaderboard."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize best posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListBestPostsRequest) -> ListPostsResponse:
        """List posts with at least one like, most liked first."""
        page = await self.post_service.list_best(
            page=request.page,
            page_size=request.page_size,
            search=request.search,
        )
        return ListPostsResponse.from_page(page)


class ListSuperBestPostsResponse(BaseModel):
    """Super-best posts response."""

    posts: list[PostItem]


class ListSuperBestPostsUseCase:
    """Use case for the short, unpaginated top of the like leaderboard."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize super-best posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self) -> ListSuperBestPostsResponse:
        """List the most liked posts."""
        summaries = await self.post_service.list_super_best()
        return ListSuperBestPostsResponse(
            posts=[PostItem.from_summary(s) for s in summaries]
        )
