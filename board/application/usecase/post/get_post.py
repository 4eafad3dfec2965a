"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.comment.get_comments import CommentItem
from board.domain.service import CommentService, PostService, VoteService
from board.domain.value import PostId, UserId, VotableType

from .list_posts import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    viewer_id: str | None = None  # User ID if authenticated


class GetPostResponse(PostItem):
    """Post with the viewer's vote and the full comment tree."""

    is_liked: bool
    is_disliked: bool
    comments: list[CommentItem]
    total_comments: int


class GetPostUseCase:
    """Use case for getting a single post with its discussion."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Steps:
        1. Load post with counts (404 when missing)
        2. Read the viewer's own vote on the post
        3. Build the comment tree with per-comment vote state

        Args:
            request: Get post request

        Returns:
            Post details, vote state and comments

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(UUID(request.post_id))
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        summary = await self.post_service.get_post_summary(post_id)
        vote_state = await self.vote_service.get_vote_state(
            VotableType.POST, post_id, viewer_id
        )
        tree = await self.comment_service.list_tree(post_id, viewer_id)

        return GetPostResponse(
            **PostItem.from_summary(summary).model_dump(),
            is_liked=vote_state.is_liked,
            is_disliked=vote_state.is_disliked,
            comments=[CommentItem.from_node(node) for node in tree.roots],
            total_comments=tree.total_count,
        )
