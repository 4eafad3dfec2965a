"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, asc, desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Post, PostSummary
from board.domain.repository.post import PostRepository, PostSortOrder
from board.domain.value import PostId, UserId, VoteKind
from board.persistence.mappers import post_to_dict, row_to_post, row_to_post_summary
from board.persistence.tables import comments_table, post_votes_table, posts_table

# Correlated count subqueries, evaluated per post row
_comment_count = (
    select(func.count())
    .select_from(comments_table)
    .where(comments_table.c.post_id == posts_table.c.id)
    .scalar_subquery()
)
_like_count = (
    select(func.count())
    .select_from(post_votes_table)
    .where(
        post_votes_table.c.post_id == posts_table.c.id,
        post_votes_table.c.kind == VoteKind.LIKE.value,
    )
    .scalar_subquery()
)
_dislike_count = (
    select(func.count())
    .select_from(post_votes_table)
    .where(
        post_votes_table.c.post_id == posts_table.c.id,
        post_votes_table.c.kind == VoteKind.DISLIKE.value,
    )
    .scalar_subquery()
)


def _summary_select():
    return select(
        posts_table,
        _comment_count.label("comment_count"),
        _like_count.label("like_count"),
        _dislike_count.label("dislike_count"),
    )


def _filters(search: Optional[str], liked_only: bool) -> list:
    conditions = []
    if search:
        conditions.append(
            or_(
                posts_table.c.title.icontains(search, autoescape=True),
                posts_table.c.content.icontains(search, autoescape=True),
            )
        )
    if liked_only:
        conditions.append(_like_count > 0)
    return conditions


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_summary(self, post_id: PostId) -> Optional[PostSummary]:
        """Find a post with its comment and vote counts."""
        stmt = _summary_select().where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post_summary(dict(row)) if row else None

    async def find_page(
        self,
        search: Optional[str] = None,
        sort: PostSortOrder = PostSortOrder.LATEST,
        limit: int = 10,
        offset: int = 0,
        liked_only: bool = False,
    ) -> List[PostSummary]:
        """Find a page of posts with their counts."""
        with logfire.span(
            "post_repository.find_page",
            search=search,
            sort=sort.value,
            limit=limit,
            offset=offset,
            liked_only=liked_only,
        ):
            stmt = _summary_select()
            conditions = _filters(search, liked_only)
            if conditions:
                stmt = stmt.where(and_(*conditions))

            if sort == PostSortOrder.OLDEST:
                stmt = stmt.order_by(asc(posts_table.c.created_at))
            elif sort == PostSortOrder.LIKES:
                stmt = stmt.order_by(desc(_like_count), desc(posts_table.c.created_at))
            elif sort == PostSortOrder.COMMENTS:
                stmt = stmt.order_by(
                    desc(_comment_count), desc(posts_table.c.created_at)
                )
            else:
                stmt = stmt.order_by(desc(posts_table.c.created_at))

            stmt = stmt.order_by(posts_table.c.id).limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            summaries = [row_to_post_summary(dict(row)) for row in result.mappings()]
            logfire.info("Found posts", count=len(summaries))
            return summaries

    async def count(
        self, search: Optional[str] = None, liked_only: bool = False
    ) -> int:
        """Count posts matching the listing filters."""
        stmt = select(func.count()).select_from(posts_table)
        conditions = _filters(search, liked_only)
        if conditions:
            stmt = stmt.where(and_(*conditions))

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self, author_id: UserId, limit: int = 5
    ) -> List[PostSummary]:
        """Find the most recent posts of an author."""
        stmt = (
            _summary_select()
            .where(posts_table.c.author_id == author_id)
            .order_by(desc(posts_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_post_summary(dict(row)) for row in result.mappings()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts written by an author."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_likes_received(self, author_id: UserId) -> int:
        """Count likes received across all posts of an author."""
        stmt = (
            select(func.count())
            .select_from(
                post_votes_table.join(
                    posts_table, post_votes_table.c.post_id == posts_table.c.id
                )
            )
            .where(
                posts_table.c.author_id == author_id,
                post_votes_table.c.kind == VoteKind.LIKE.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            existing = await self.find_by_id(post.id)
            post_dict = post_to_dict(post)

            if existing:
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                stmt = posts_table.insert().values(**post_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post; comments and votes go with it via ON DELETE CASCADE."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
