"""Vote entity.

Votes are likes or dislikes left on posts and comments. Each user holds at
most one vote per subject, so liking and disliking the same subject at the
same time is impossible.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from board.domain.model.common import DomainModel, utcnow
from board.domain.value import UserId, VotableType, VoteId, VoteKind


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per subject (enforced by database unique constraint)
    - The kind is either like or dislike, never both
    - Polymorphic reference to the votable (post or comment)
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # PostId or CommentId (both are UUIDs)
    kind: VoteKind
    created_at: datetime = Field(default_factory=utcnow)
