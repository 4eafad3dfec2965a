"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from board.domain.model import Vote
from board.domain.repository import VoteRepository
from board.domain.value import UserId, VotableType, VoteKind

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        return self._store.votes.get((votable_type, votable_id, user_id))

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on several items."""
        wanted = set(votable_ids)
        return [
            v
            for v in self._store.votes.values()
            if v.user_id == user_id
            and v.votable_type == votable_type
            and v.votable_id in wanted
        ]

    async def count_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> dict[UUID, dict[VoteKind, int]]:
        """Count votes of each kind for several items."""
        wanted = set(votable_ids)
        counts: dict[UUID, dict[VoteKind, int]] = {}
        for vote in self._store.votes.values():
            if vote.votable_type == votable_type and vote.votable_id in wanted:
                kinds = counts.setdefault(vote.votable_id, {})
                kinds[vote.kind] = kinds.get(vote.kind, 0) + 1
        return counts

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on the item
        """
        self._store.insert_vote(vote)
        return vote

    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        kind: Optional[VoteKind] = None,
    ) -> bool:
        """Delete a user's vote on an item, optionally only of one kind."""
        key = (votable_type, votable_id, user_id)
        vote = self._store.votes.get(key)
        if vote is None or (kind is not None and vote.kind != kind):
            return False
        del self._store.votes[key]
        return True
