"""User domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from board.domain.error import (
    ConflictError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)
from board.domain.model import User, UserProfile
from board.domain.repository import PostRepository, UserRepository
from board.domain.value import Email, UserId, UserName

from .base import Service
from .password_service import PasswordService

PROFILE_RECENT_POSTS = 5


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        password_service: PasswordService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            post_repository: Post repository, used for profile statistics
            password_service: Password hashing service
        """
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.password_service = password_service

    async def register(self, email: str, name: str, password: str) -> User:
        """Register a new user.

        Args:
            email: Email address, normalized before storage
            name: Display name
            password: Plaintext password, stored as an argon2 hash

        Returns:
            The created user

        Raises:
            ValidationError: If a field is missing or malformed
            ConflictError: If the email is already registered
        """
        with logfire.span("user_service.register"):
            if not (email and email.strip() and name and name.strip() and password):
                logfire.warn("Registration with missing fields")
                raise ValidationError("Email, name and password are required")

            try:
                user_email = Email(email)
                user_name = UserName(name)
            except PydanticValidationError as e:
                logfire.warn("Registration with invalid fields", error=str(e))
                raise ValidationError(e.errors()[0]["msg"]) from e

            if await self.user_repository.find_by_email(user_email):
                logfire.warn("Email already registered", email=user_email.root)
                raise ConflictError("Email is already registered")

            user = User(
                id=UserId(uuid4()),
                email=user_email,
                name=user_name,
                password_hash=self.password_service.hash_password(password),
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race against a concurrent registration
                logfire.warn("Duplicate registration", email=user_email.root)
                raise ConflictError("Email is already registered")

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Verify credentials and return the matching user.

        Args:
            email: Email address
            password: Plaintext password

        Returns:
            The authenticated user

        Raises:
            ValidationError: If email or password is missing
            NotAuthenticatedError: If the credentials do not match
        """
        with logfire.span("user_service.authenticate"):
            if not email or not password:
                raise ValidationError("Email and password are required")

            try:
                user_email = Email(email)
            except PydanticValidationError:
                raise NotAuthenticatedError("Invalid email or password")

            user = await self.user_repository.find_by_email(user_email)
            if not user or not self.password_service.verify_password(
                password, user.password_hash
            ):
                logfire.warn("Login failed", email=user_email.root)
                raise NotAuthenticatedError("Invalid email or password")

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_profile(self, user_id: UserId) -> UserProfile:
        """Get a user's public profile with activity statistics.

        Args:
            user_id: User ID

        Returns:
            Profile with post, comment and like counts plus recent posts

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            profile = UserProfile(
                user=user,
                post_count=await self.post_repository.count_by_author(user_id),
                comment_count=await self.user_repository.count_comments(user_id),
                likes_received=await self.post_repository.count_likes_received(
                    user_id
                ),
                recent_posts=await self.post_repository.find_by_author(
                    user_id, limit=PROFILE_RECENT_POSTS
                ),
            )
            logfire.info(
                "Profile loaded",
                user_id=str(user_id),
                post_count=profile.post_count,
                comment_count=profile.comment_count,
            )
            return profile
