"""Get vote state use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.service import VoteService
from board.domain.value import UserId, VotableType

from .toggle_vote import VoteStateResponse


class GetVoteStateRequest(BaseModel):
    """Get vote state request."""

    votable_type: VotableType
    votable_id: str  # Post or comment UUID string
    viewer_id: str | None = None  # User ID if authenticated


class GetVoteStateUseCase:
    """Use case for reading vote counts without changing them."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get vote state use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStateRequest) -> VoteStateResponse:
        """Read vote counts; missing subjects report zeros."""
        state = await self.vote_service.get_vote_state(
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            user_id=UserId(UUID(request.viewer_id)) if request.viewer_id else None,
        )
        return VoteStateResponse.from_state(state)
