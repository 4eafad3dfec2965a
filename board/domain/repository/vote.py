"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from board.domain.model.vote import Vote
from board.domain.value import UserId, VotableType, VoteKind


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (post or comment)
            votable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on several items at once.

        Args:
            user_id: The user's ID
            votable_type: Type of items (post or comment)
            votable_ids: IDs of the items

        Returns:
            The votes the user holds on any of the items
        """
        pass

    @abstractmethod
    async def count_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> Dict[UUID, Dict[VoteKind, int]]:
        """Count votes of each kind for several items.

        Args:
            votable_type: Type of items (post or comment)
            votable_ids: IDs of the items

        Returns:
            Mapping of item ID to per-kind counts; items without votes may be
            missing from the mapping
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        The insert runs in its own savepoint so a unique-key violation leaves
        the surrounding transaction usable.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already voted on the item
        """
        pass

    @abstractmethod
    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        kind: Optional[VoteKind] = None,
    ) -> bool:
        """Delete a user's vote on an item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (post or comment)
            votable_id: ID of the item
            kind: Only delete a vote of this kind when given

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass
