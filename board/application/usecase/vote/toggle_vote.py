"""Toggle vote use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.service import VoteService
from board.domain.value import PostId, UserId, VotableType, VoteKind, VoteState


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    votable_type: VotableType
    votable_id: str  # Post or comment UUID string
    kind: VoteKind
    user_id: str  # User ID from authenticated user
    post_id: str | None = None  # Owning post for comment votes


class VoteStateResponse(BaseModel):
    """Vote counts of a subject and the caller's own vote."""

    like_count: int
    dislike_count: int
    is_liked: bool
    is_disliked: bool

    @classmethod
    def from_state(cls, state: VoteState) -> "VoteStateResponse":
        """Build a response from a vote state."""
        return cls(**state.model_dump())


class ToggleVoteUseCase:
    """Use case for liking or disliking a post or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ToggleVoteRequest) -> VoteStateResponse:
        """Execute toggle vote flow.

        Casting the kind the user already holds retracts it; casting the
        other kind replaces the user's previous vote.

        Args:
            request: Toggle vote request

        Returns:
            Authoritative vote state after the toggle

        Raises:
            NotFoundError: If the subject does not exist
        """
        state = await self.vote_service.toggle_vote(
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            user_id=UserId(UUID(request.user_id)),
            kind=request.kind,
            post_id=PostId(UUID(request.post_id)) if request.post_id else None,
        )
        return VoteStateResponse.from_state(state)
