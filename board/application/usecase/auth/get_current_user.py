"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.domain.service import UserService
from board.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From verified JWT


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    authenticated: bool = True
    user_id: str
    email: str
    name: str
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the user a verified token belongs to.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        return GetCurrentUserResponse(
            user_id=str(user.id),
            email=user.email.root,
            name=user.name.root,
            created_at=user.created_at,
        )
