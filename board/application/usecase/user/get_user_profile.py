"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.post.list_posts import PostItem
from board.domain.service import UserService
from board.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # UUID string


class GetUserProfileResponse(BaseModel):
    """Public user profile.

    The email address is private and never part of the profile.
    """

    user_id: str
    name: str
    created_at: datetime
    post_count: int
    comment_count: int
    likes_received: int
    recent_posts: list[PostItem]


class GetUserProfileUseCase:
    """Use case for getting a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Args:
            request: Get user profile request

        Returns:
            Profile with activity statistics and the five newest posts

        Raises:
            NotFoundError: If the user does not exist
        """
        profile = await self.user_service.get_profile(UserId(UUID(request.user_id)))

        return GetUserProfileResponse(
            user_id=str(profile.user.id),
            name=profile.user.name.root,
            created_at=profile.user.created_at,
            post_count=profile.post_count,
            comment_count=profile.comment_count,
            likes_received=profile.likes_received,
            recent_posts=[PostItem.from_summary(s) for s in profile.recent_posts],
        )
