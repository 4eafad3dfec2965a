"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from board.domain.model import Comment, Post, PostSummary, User, Vote
from board.domain.value import (
    CommentId,
    Email,
    PostId,
    UserId,
    UserName,
    VotableType,
    VoteId,
    VoteKind,
)


def _uuid(value: Any) -> UUID:
    """Accept UUIDs that come back from the driver as strings."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        name=UserName(row["name"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion
    """
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        author_name=UserName(row["author_name"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_post_summary(row: Dict[str, Any]) -> PostSummary:
    """Convert a post row carrying count columns to a PostSummary.

    Args:
        row: Database row with comment_count, like_count and dislike_count

    Returns:
        PostSummary domain model
    """
    return PostSummary(
        post=row_to_post(row),
        comment_count=row.get("comment_count") or 0,
        like_count=row.get("like_count") or 0,
        dislike_count=row.get("dislike_count") or 0,
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_name=UserName(row["author_name"]),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row["depth"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any], votable_type: VotableType) -> Vote:
    """Convert a post_votes or comment_votes row to Vote domain model.

    Args:
        row: Database row as dict
        votable_type: Which vote table the row comes from

    Returns:
        Vote domain model
    """
    subject_column = "post_id" if votable_type == VotableType.POST else "comment_id"
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        votable_type=votable_type,
        votable_id=_uuid(row[subject_column]),
        kind=VoteKind(row["kind"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to a row of its vote table.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for insertion into post_votes or comment_votes
    """
    subject_column = (
        "post_id" if vote.votable_type == VotableType.POST else "comment_id"
    )
    return {
        "id": vote.id,
        subject_column: vote.votable_id,
        "user_id": vote.user_id,
        "kind": vote.kind.value,
        "created_at": vote.created_at,
    }
