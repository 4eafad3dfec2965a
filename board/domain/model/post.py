"""Post aggregate root.

Posts are the primary content type of the board: a title and a body
written by one author.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel, utcnow
from board.domain.value import PostId, UserId, UserName

TITLE_MAX_LENGTH = 300
CONTENT_MAX_LENGTH = 20000


class Post(DomainModel):
    """Post aggregate root.

    Owned by its author; only the author may edit or delete it. Deleting a
    post removes its comments and every vote on the post or its comments.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    author_id: UserId
    author_name: UserName
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class PostSummary(DomainModel):
    """Post with the aggregate counts shown in listings."""

    post: Post
    comment_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    dislike_count: int = Field(default=0, ge=0)


class PostPage(DomainModel):
    """One page of a post listing."""

    items: list[PostSummary]
    total_count: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    current_page: int = Field(ge=1)
    page_size: int = Field(ge=1)
