"""User profile routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from board.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from board.domain.error import DomainError
from board.interface.api.errors import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile.

    Args:
        user_id: User UUID
        get_user_profile_use_case: Get user profile use case from DI

    Returns:
        Name, join date, activity counts and recent posts

    Raises:
        HTTPException: 404 if the user does not exist
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=str(user_id))
        )
    except DomainError as e:
        logfire.warn("Profile lookup failed", error=str(e), user_id=str(user_id))
        raise to_http_exception(e)
