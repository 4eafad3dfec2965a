"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, PostId
from board.persistence.mappers import comment_to_dict, row_to_comment
from board.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments of a post in one flat query."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Delete a comment with every descendant and their votes.

        Descendants and votes are removed by ON DELETE CASCADE; the recursive
        query only counts what is about to go.
        """
        with logfire.span(
            "comment_repository.delete_subtree", comment_id=str(comment_id)
        ):
            subtree = (
                select(comments_table.c.id)
                .where(comments_table.c.id == comment_id)
                .cte("subtree", recursive=True)
            )
            subtree = subtree.union_all(
                select(comments_table.c.id).where(
                    comments_table.c.parent_id == subtree.c.id
                )
            )
            count_result = await self.session.execute(
                select(func.count()).select_from(subtree)
            )
            removed = count_result.scalar() or 0

            await self.session.execute(
                comments_table.delete().where(comments_table.c.id == comment_id)
            )
            logfire.info("Comment subtree deleted", removed=removed)
            return removed
