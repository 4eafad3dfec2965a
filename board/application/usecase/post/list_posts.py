"""List posts use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from board.domain.model import PostPage, PostSummary
from board.domain.repository import PostSortOrder
from board.domain.service import PostService


class PostItem(BaseModel):
    """Post item in response."""

    post_id: str
    title: str
    content: str
    author_id: str
    author_name: str
    created_at: datetime
    updated_at: datetime
    comment_count: int
    like_count: int
    dislike_count: int

    @classmethod
    def from_summary(cls, summary: PostSummary) -> "PostItem":
        """Build a response item from a post summary."""
        post = summary.post
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            author_id=str(post.author_id),
            author_name=post.author_name.root,
            created_at=post.created_at,
            updated_at=post.updated_at,
            comment_count=summary.comment_count,
            like_count=summary.like_count,
            dislike_count=summary.dislike_count,
        )


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    search: str | None = None
    sort: PostSortOrder = PostSortOrder.LATEST


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total_count: int
    total_pages: int
    current_page: int
    page_size: int

    @classmethod
    def from_page(cls, page: PostPage) -> "ListPostsResponse":
        """Build a response from a page of summaries."""
        return cls(
            posts=[PostItem.from_summary(s) for s in page.items],
            total_count=page.total_count,
            total_pages=page.total_pages,
            current_page=page.current_page,
            page_size=page.page_size,
        )


class ListPostsUseCase:
    """Use case for listing posts with search, sorting and pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Paging, search and sort parameters

        Returns:
            One page of posts with their counts
        """
        page = await self.post_service.list_posts(
            page=request.page,
            page_size=request.page_size,
            search=request.search,
            sort=request.sort,
        )
        return ListPostsResponse.from_page(page)
