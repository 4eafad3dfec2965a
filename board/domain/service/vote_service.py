"""Vote domain service."""

from typing import Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from board.domain.error import NotFoundError
from board.domain.model.vote import Vote
from board.domain.repository import CommentRepository, PostRepository, VoteRepository
from board.domain.value import (
    CommentId,
    PostId,
    UserId,
    VotableType,
    VoteId,
    VoteKind,
    VoteState,
)

from .base import Service

# Unique keys guarding one vote per subject and user
VOTE_UNIQUE_CONSTRAINTS = ("uq_post_votes_post_user", "uq_comment_votes_comment_user")


class VoteService(Service):
    """Domain service for like and dislike toggles.

    A user holds at most one vote per subject. Casting a like removes the
    user's dislike on the same subject and vice versa, and casting the kind
    the user already holds retracts it.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_repository: Post repository, used for existence checks
            comment_repository: Comment repository, used for existence checks
        """
        self.vote_repository = vote_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def toggle_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        kind: VoteKind,
        post_id: PostId | None = None,
    ) -> VoteState:
        """Toggle a like or dislike on a post or comment.

        Args:
            votable_type: Type of subject (post or comment)
            votable_id: Subject ID
            user_id: Voting user
            kind: Kind of vote being toggled
            post_id: For comment votes, the post the comment must belong to

        Returns:
            Vote state of the subject after the toggle

        Raises:
            NotFoundError: If the subject does not exist
        """
        with logfire.span(
            "vote_service.toggle_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=str(user_id),
            kind=kind.value,
        ):
            await self._ensure_votable(votable_type, votable_id, post_id)

            existing = await self.vote_repository.find_by_user_and_votable(
                user_id, votable_type, votable_id
            )

            if existing and existing.kind == kind:
                await self.vote_repository.delete_by_user_and_votable(
                    user_id, votable_type, votable_id, kind=kind
                )
                logfire.info(
                    "Vote retracted",
                    votable_id=str(votable_id),
                    user_id=str(user_id),
                    kind=kind.value,
                )
            else:
                if existing:
                    await self.vote_repository.delete_by_user_and_votable(
                        user_id, votable_type, votable_id, kind=kind.opposite
                    )

                vote = Vote(
                    id=VoteId(uuid4()),
                    user_id=user_id,
                    votable_type=votable_type,
                    votable_id=votable_id,
                    kind=kind,
                )
                try:
                    await self.vote_repository.save(vote)
                    logfire.info(
                        "Vote cast",
                        votable_id=str(votable_id),
                        user_id=str(user_id),
                        kind=kind.value,
                    )
                except IntegrityError as e:
                    if not _is_duplicate_vote(e):
                        logfire.error(
                            "Vote insert failed",
                            votable_id=str(votable_id),
                            user_id=str(user_id),
                            error=str(e.orig),
                        )
                        raise
                    # A concurrent toggle won the race; report what it left
                    logfire.warn(
                        "Duplicate vote attempt",
                        votable_id=str(votable_id),
                        user_id=str(user_id),
                        kind=kind.value,
                    )

            return await self.get_vote_state(votable_type, votable_id, user_id)

    async def get_vote_state(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId | None = None,
    ) -> VoteState:
        """Read vote counts of a subject and the user's own vote.

        Missing subjects report zero counts rather than failing.

        Args:
            votable_type: Type of subject (post or comment)
            votable_id: Subject ID
            user_id: Viewing user, None for anonymous callers

        Returns:
            Vote state of the subject
        """
        states = await self.get_vote_states(votable_type, [votable_id], user_id)
        return states[votable_id]

    async def get_vote_states(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
        user_id: UserId | None = None,
    ) -> dict[UUID, VoteState]:
        """Read vote states of several subjects at once.

        Args:
            votable_type: Type of subjects (post or comment)
            votable_ids: Subject IDs
            user_id: Viewing user, None for anonymous callers

        Returns:
            Mapping of every requested ID to its vote state
        """
        if not votable_ids:
            return {}

        with logfire.span(
            "vote_service.get_vote_states",
            votable_type=votable_type.value,
            count=len(votable_ids),
        ):
            # One count query and one personal-state query for the whole batch
            counts = await self.vote_repository.count_by_votables(
                votable_type, votable_ids
            )
            own: dict[UUID, VoteKind] = {}
            if user_id is not None:
                votes = await self.vote_repository.find_by_user_and_votables(
                    user_id, votable_type, votable_ids
                )
                own = {vote.votable_id: vote.kind for vote in votes}

            states = {}
            for votable_id in votable_ids:
                kinds = counts.get(votable_id, {})
                states[votable_id] = VoteState(
                    like_count=kinds.get(VoteKind.LIKE, 0),
                    dislike_count=kinds.get(VoteKind.DISLIKE, 0),
                    is_liked=own.get(votable_id) == VoteKind.LIKE,
                    is_disliked=own.get(votable_id) == VoteKind.DISLIKE,
                )
            return states

    async def _ensure_votable(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        post_id: PostId | None,
    ) -> None:
        """Raise NotFoundError unless the subject exists."""
        if votable_type == VotableType.POST:
            if not await self.post_repository.find_by_id(PostId(votable_id)):
                logfire.warn("Vote on non-existent post", post_id=str(votable_id))
                raise NotFoundError("Post", str(votable_id))
            return

        comment = await self.comment_repository.find_by_id(CommentId(votable_id))
        if not comment or (post_id is not None and comment.post_id != post_id):
            logfire.warn(
                "Vote on non-existent comment",
                comment_id=str(votable_id),
                post_id=str(post_id) if post_id else None,
            )
            raise NotFoundError("Comment", str(votable_id))


def _is_duplicate_vote(error: IntegrityError) -> bool:
    """Tell a one-vote-per-user violation apart from other integrity errors."""
    message = str(error.orig)
    return any(name in message for name in VOTE_UNIQUE_CONSTRAINTS)
