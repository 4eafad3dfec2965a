"""Unit tests for the registration and login use cases."""

import pytest

from board.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from board.domain.error import NotAuthenticatedError, ValidationError
from board.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for RegisterUseCase, LoginUseCase and GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_register_then_login_issues_token(self, unit_env):
        """A registered user should receive a token for their own ID."""
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        registered = await register_use_case.execute(
            RegisterRequest(email="Dana@Example.com", name="Dana", password="pw")
        )

        # Act
        response = await login_use_case.execute(
            LoginRequest(email="dana@example.com", password="pw")
        )

        # Assert
        assert registered.message == "Registration successful"
        assert response.user_id == registered.user_id
        assert response.email == "dana@example.com"
        assert response.name == "Dana"
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == registered.user_id
        assert payload.name == "Dana"

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, unit_env):
        """A wrong password should not authenticate."""
        register_use_case = await unit_env.get(RegisterUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        await register_use_case.execute(
            RegisterRequest(email="dana@example.com", name="Dana", password="pw")
        )

        with pytest.raises(NotAuthenticatedError):
            await login_use_case.execute(
                LoginRequest(email="dana@example.com", password="nope")
            )

    @pytest.mark.asyncio
    async def test_register_with_missing_fields(self, unit_env):
        """Omitted fields should be a validation error."""
        register_use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValidationError):
            await register_use_case.execute(RegisterRequest(email="e@example.com"))

    @pytest.mark.asyncio
    async def test_current_user(self, unit_env):
        """The current user lookup should return the stored profile."""
        register_use_case = await unit_env.get(RegisterUseCase)
        get_current_user = await unit_env.get(GetCurrentUserUseCase)
        registered = await register_use_case.execute(
            RegisterRequest(email="eve@example.com", name="Eve", password="pw")
        )

        response = await get_current_user.execute(
            GetCurrentUserRequest(user_id=registered.user_id)
        )

        assert response.authenticated
        assert response.email == "eve@example.com"
        assert response.name == "Eve"
