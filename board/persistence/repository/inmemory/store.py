"""Shared state for the in-memory repositories.

One store backs every in-memory repository of a container so that
cross-table behavior matches the database: unique keys raise
``IntegrityError`` and deletions cascade to replies and votes.
"""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from board.domain.model import Comment, Post, User, Vote
from board.domain.value import CommentId, PostId, UserId, VotableType

_UNIQUE_VIOLATION = 'duplicate key value violates unique constraint "{}"'

VoteKey = tuple[VotableType, UUID, UserId]


class InMemoryStore:
    """In-memory tables keyed the way the database keys them."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        # Unique on (subject, user), like the vote tables
        self.votes: dict[VoteKey, Vote] = {}

    def insert_user(self, user: User) -> None:
        """Insert a user, enforcing email uniqueness."""
        if any(u.email == user.email for u in self.users.values()):
            raise IntegrityError(
                "INSERT INTO users",
                None,
                Exception(_UNIQUE_VIOLATION.format("uq_users_email")),
            )
        self.users[user.id] = user

    def insert_vote(self, vote: Vote) -> None:
        """Insert a vote, enforcing one vote per subject and user."""
        key = (vote.votable_type, vote.votable_id, vote.user_id)
        if key in self.votes:
            constraint = (
                "uq_post_votes_post_user"
                if vote.votable_type == VotableType.POST
                else "uq_comment_votes_comment_user"
            )
            raise IntegrityError(
                "INSERT INTO votes",
                None,
                Exception(_UNIQUE_VIOLATION.format(constraint)),
            )
        self.votes[key] = vote

    def subtree_ids(self, comment_id: CommentId) -> list[CommentId]:
        """IDs of a comment and all of its descendants."""
        if comment_id not in self.comments:
            return []

        ids = [comment_id]
        frontier = [comment_id]
        while frontier:
            parent_id = frontier.pop()
            for comment in self.comments.values():
                if comment.parent_id == parent_id:
                    ids.append(comment.id)
                    frontier.append(comment.id)
        return ids

    def delete_comments(self, comment_ids: list[CommentId]) -> None:
        """Delete comments and the votes on them."""
        doomed = set(comment_ids)
        for comment_id in doomed:
            self.comments.pop(comment_id, None)
        self._delete_votes(VotableType.COMMENT, doomed)

    def delete_post(self, post_id: PostId) -> bool:
        """Delete a post with its comments and all related votes."""
        if self.posts.pop(post_id, None) is None:
            return False

        self.delete_comments(
            [c.id for c in self.comments.values() if c.post_id == post_id]
        )
        self._delete_votes(VotableType.POST, {post_id})
        return True

    def _delete_votes(self, votable_type: VotableType, ids: set) -> None:
        for key in [k for k in self.votes if k[0] == votable_type and k[1] in ids]:
            del self.votes[key]
