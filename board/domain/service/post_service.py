"""Post domain service."""

import math
from uuid import uuid4

import logfire

from board.config import BoardSettings
from board.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from board.domain.model import Post, PostPage, PostSummary, User
from board.domain.model.common import utcnow
from board.domain.model.post import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH
from board.domain.repository import PostRepository, PostSortOrder
from board.domain.value import PostId, UserId

from .base import Service


def _clean_text(value: str | None, field: str, max_length: int) -> str:
    """Trim a required text field and enforce its length bounds.

    Raises:
        ValidationError: If the value is empty or too long
    """
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} is required")
    if len(cleaned) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return cleaned


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, board_settings: BoardSettings
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            board_settings: Listing configuration
        """
        self.post_repository = post_repository
        self.board_settings = board_settings

    async def create_post(self, author: User, title: str, content: str) -> Post:
        """Create a post.

        Args:
            author: Authoring user
            title: Post title
            content: Post body

        Returns:
            The created post

        Raises:
            ValidationError: If title or content is empty or too long
        """
        with logfire.span("post_service.create_post", author_id=str(author.id)):
            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                title=_clean_text(title, "Title", TITLE_MAX_LENGTH),
                content=_clean_text(content, "Content", CONTENT_MAX_LENGTH),
                author_id=author.id,
                author_name=author.name,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), title=saved.title)
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_post_summary(self, post_id: PostId) -> PostSummary:
        """Get a post with its comment and vote counts.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post_summary", post_id=str(post_id)):
            summary = await self.post_repository.find_summary(post_id)
            if not summary:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return summary

    async def update_post(
        self, post_id: PostId, requester_id: UserId, title: str, content: str
    ) -> Post:
        """Replace the title and content of a post.

        Args:
            post_id: Post ID
            requester_id: User performing the edit
            title: New title
            content: New body

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the requester is not the author
            ValidationError: If title or content is empty or too long
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            requester_id=str(requester_id),
        ):
            post = await self.get_post(post_id)
            if post.author_id != requester_id:
                logfire.warn(
                    "Post update by non-author",
                    post_id=str(post_id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(requester_id))

            updated = post.model_copy(
                update={
                    "title": _clean_text(title, "Title", TITLE_MAX_LENGTH),
                    "content": _clean_text(content, "Content", CONTENT_MAX_LENGTH),
                    "updated_at": utcnow(),
                }
            )
            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(post_id))
            return saved

    async def delete_post(self, post_id: PostId, requester_id: UserId) -> None:
        """Delete a post together with its comments and votes.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the requester is not the author
        """
        with logfire.span(
            "post_service.delete_post",
            post_id=str(post_id),
            requester_id=str(requester_id),
        ):
            post = await self.get_post(post_id)
            if post.author_id != requester_id:
                logfire.warn(
                    "Post deletion by non-author",
                    post_id=str(post_id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(requester_id))

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def list_posts(
        self,
        page: int = 1,
        page_size: int | None = None,
        search: str | None = None,
        sort: PostSortOrder = PostSortOrder.LATEST,
    ) -> PostPage:
        """List posts with search, sorting and pagination.

        Args:
            page: 1-based page number
            page_size: Posts per page, clamped to the configured maximum
            search: Case-insensitive substring matched against title or content
            sort: Sort order

        Returns:
            The requested page with total counts
        """
        with logfire.span(
            "post_service.list_posts", page=page, search=search, sort=sort.value
        ):
            return await self._list_page(
                page, page_size, search, sort, liked_only=False
            )

    async def list_best(
        self,
        page: int = 1,
        page_size: int | None = None,
        search: str | None = None,
    ) -> PostPage:
        """List posts with at least one like, most liked first.

        Args:
            page: 1-based page number
            page_size: Posts per page, clamped to the configured maximum
            search: Case-insensitive substring matched against title or content

        Returns:
            The requested page with total counts
        """
        with logfire.span("post_service.list_best", page=page, search=search):
            return await self._list_page(
                page, page_size, search, PostSortOrder.LIKES, liked_only=True
            )

    async def list_super_best(self, limit: int | None = None) -> list[PostSummary]:
        """Top of the like leaderboard, unpaginated.

        Args:
            limit: Number of posts, defaults to the configured leaderboard size

        Returns:
            Most liked posts, ties broken by recency
        """
        limit = limit or self.board_settings.super_best_limit
        with logfire.span("post_service.list_super_best", limit=limit):
            return await self.post_repository.find_page(
                sort=PostSortOrder.LIKES, limit=limit, offset=0, liked_only=True
            )

    async def _list_page(
        self,
        page: int,
        page_size: int | None,
        search: str | None,
        sort: PostSortOrder,
        liked_only: bool,
    ) -> PostPage:
        page = max(page, 1)
        page_size = min(
            max(page_size or self.board_settings.default_page_size, 1),
            self.board_settings.max_page_size,
        )
        search = search.strip() if search and search.strip() else None

        items = await self.post_repository.find_page(
            search=search,
            sort=sort,
            limit=page_size,
            offset=(page - 1) * page_size,
            liked_only=liked_only,
        )
        total_count = await self.post_repository.count(
            search=search, liked_only=liked_only
        )

        logfire.info(
            "Posts listed", count=len(items), total_count=total_count, page=page
        )
        return PostPage(
            items=items,
            total_count=total_count,
            total_pages=math.ceil(total_count / page_size),
            current_page=page,
            page_size=page_size,
        )
