"""Comment entity.

Comments are threaded discussions on posts. A reply points at its parent
through ``parent_id``; the tree itself is never persisted and is rebuilt
from the flat list on every read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel, utcnow
from board.domain.value import CommentId, PostId, UserId, UserName

CONTENT_MAX_LENGTH = 10000


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a post or a reply to another comment
    of the same post. Comments cannot be edited, only deleted together with
    all of their replies.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_name: UserName
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
