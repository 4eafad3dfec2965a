"""Register use case."""

from pydantic import BaseModel

from board.domain.service import UserService


class RegisterRequest(BaseModel):
    """Register request."""

    email: str | None = None
    name: str | None = None
    password: str | None = None


class RegisterResponse(BaseModel):
    """Register response."""

    message: str
    user_id: str


class RegisterUseCase:
    """Use case for creating a user account with email and password."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Args:
            request: Register request

        Returns:
            Confirmation with the new user's ID

        Raises:
            ValidationError: If a field is missing or malformed
            ConflictError: If the email is already registered
        """
        user = await self.user_service.register(
            email=request.email or "",
            name=request.name or "",
            password=request.password or "",
        )
        return RegisterResponse(message="Registration successful", user_id=str(user.id))
