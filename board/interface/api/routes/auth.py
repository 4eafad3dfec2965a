"""Authentication routes."""

from datetime import datetime

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status
from pydantic import BaseModel

from board.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from board.config import Settings
from board.domain.error import DomainError, NotFoundError
from board.domain.service import JWTService
from board.interface.api.errors import to_http_exception
from board.interface.api.session import optional_user_id

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

AUTH_COOKIE = "auth_token"


class LoginAPIResponse(BaseModel):
    """Login response; the token travels in the cookie only."""

    message: str
    user_id: str
    email: str
    name: str


class LogoutResponse(BaseModel):
    """Logout response."""

    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user_id: str | None = None
    email: str | None = None
    name: str | None = None
    created_at: datetime | None = None


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create a user account.

    Args:
        request: Email, name and password
        register_use_case: Register use case from DI

    Returns:
        Confirmation message

    Raises:
        HTTPException: 400 for missing fields, 409 if the email is taken
    """
    try:
        return await register_use_case.execute(request)
    except DomainError as e:
        logfire.warn("Registration rejected", error=str(e))
        raise to_http_exception(e)


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Verify credentials and set the session cookie.

    Args:
        request: Email and password
        response: FastAPI response object
        login_use_case: Login use case from DI
        settings: Application settings from DI

    Returns:
        The signed-in user

    Raises:
        HTTPException: 400 for missing fields, 401 for wrong credentials
    """
    try:
        result = await login_use_case.execute(request)
    except DomainError as e:
        logfire.warn("Login rejected", error=str(e))
        raise to_http_exception(e)

    response.set_cookie(
        key=AUTH_COOKIE,
        value=result.token,
        httponly=True,
        secure=settings.auth.cookie_secure,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
    logfire.info("Auth cookie set", user_id=result.user_id)

    return LoginAPIResponse(
        message="Login successful",
        user_id=result.user_id,
        email=result.email,
        name=result.name,
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Logout user by clearing authentication cookie.

    Args:
        response: FastAPI response object

    Returns:
        Logout success message
    """
    response.delete_cookie(key=AUTH_COOKIE, path="/")
    return LogoutResponse(message="Successfully logged out")


@router.get(
    "/me", response_model=AuthStatusResponse, response_model_exclude_none=True
)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AuthStatusResponse:
    """Report the signed-in user, or that nobody is signed in.

    Args:
        get_current_user_use_case: Get current user use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Optional Bearer token header

    Returns:
        Authentication status with user details when signed in
    """
    user_id = optional_user_id(jwt_service, auth_token, authorization)
    if not user_id:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=user_id)
        )
    except NotFoundError:
        # Token outlived its user
        logfire.warn("Token for missing user", user_id=user_id)
        return AuthStatusResponse(authenticated=False)
    except DomainError as e:
        raise to_http_exception(e)

    return AuthStatusResponse(
        authenticated=True,
        user_id=user.user_id,
        email=user.email,
        name=user.name,
        created_at=user.created_at,
    )
