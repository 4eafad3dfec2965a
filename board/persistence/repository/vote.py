"""PostgreSQL implementation of Vote repository."""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import Column, Table, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Vote
from board.domain.repository import VoteRepository
from board.domain.value import UserId, VotableType, VoteKind
from board.persistence.mappers import row_to_vote, vote_to_dict
from board.persistence.tables import comment_votes_table, post_votes_table


def _vote_table(votable_type: VotableType) -> tuple[Table, Column]:
    """Vote table and subject column for a votable type."""
    if votable_type == VotableType.POST:
        return post_votes_table, post_votes_table.c.post_id
    return comment_votes_table, comment_votes_table.c.comment_id


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        table, subject = _vote_table(votable_type)
        stmt = select(table).where(table.c.user_id == user_id, subject == votable_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row), votable_type) if row else None

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on several items at once."""
        if not votable_ids:
            return []

        table, subject = _vote_table(votable_type)
        stmt = select(table).where(
            table.c.user_id == user_id, subject.in_(list(votable_ids))
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row), votable_type) for row in result.mappings()]

    async def count_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> Dict[UUID, Dict[VoteKind, int]]:
        """Count votes of each kind for several items in one grouped query."""
        if not votable_ids:
            return {}

        table, subject = _vote_table(votable_type)
        stmt = (
            select(subject, table.c.kind, func.count())
            .where(subject.in_(list(votable_ids)))
            .group_by(subject, table.c.kind)
        )
        result = await self.session.execute(stmt)

        counts: Dict[UUID, Dict[VoteKind, int]] = defaultdict(dict)
        for votable_id, kind, count in result.all():
            counts[votable_id][VoteKind(kind)] = count
        return dict(counts)

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote inside a savepoint.

        Raises:
            IntegrityError: If the user already voted on the item
        """
        table, _ = _vote_table(vote.votable_type)
        async with self.session.begin_nested():
            await self.session.execute(table.insert().values(**vote_to_dict(vote)))
        return vote

    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        kind: Optional[VoteKind] = None,
    ) -> bool:
        """Delete a user's vote on an item, optionally only of one kind."""
        table, subject = _vote_table(votable_type)
        stmt = table.delete().where(table.c.user_id == user_id, subject == votable_id)
        if kind is not None:
            stmt = stmt.where(table.c.kind == kind.value)

        result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
