"""Login use case."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    """Login response.

    The token is set as a cookie by the route and never serialized into the
    response body.
    """

    token: str
    user_id: str
    email: str
    name: str
    created_at: datetime


class LoginUseCase:
    """Use case for verifying credentials and issuing a session token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Verify email and password via user service
        2. Issue JWT carrying user ID, email and name

        Args:
            request: Login request

        Returns:
            Session token and user details

        Raises:
            ValidationError: If email or password is missing
            NotAuthenticatedError: If credentials do not match
        """
        user = await self.user_service.authenticate(
            email=request.email or "", password=request.password or ""
        )

        token = self.jwt_service.create_token(
            user_id=str(user.id), email=user.email.root, name=user.name.root
        )

        return LoginResponse(
            token=token,
            user_id=str(user.id),
            email=user.email.root,
            name=user.name.root,
            created_at=user.created_at,
        )
