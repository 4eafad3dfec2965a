"""Vote use cases."""

from .get_vote_state import GetVoteStateRequest, GetVoteStateUseCase
from .toggle_vote import ToggleVoteRequest, ToggleVoteUseCase, VoteStateResponse

__all__ = [
    "GetVoteStateRequest",
    "GetVoteStateUseCase",
    "ToggleVoteRequest",
    "ToggleVoteUseCase",
    "VoteStateResponse",
]
