"""Unit tests for UserService and the authentication services."""

from uuid import uuid4

import pytest

from board.config import AuthSettings
from board.domain.error import (
    ConflictError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)
from board.domain.repository import CommentRepository, PostRepository
from board.domain.service import (
    JWTService,
    PasswordService,
    UserService,
    VoteService,
)
from board.domain.value import UserId, VotableType, VoteKind
from board.util.jwt import JWTError
from tests.conftest import at, make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_normalizes_email_and_hashes_password(self, unit_env):
        """Registration should store a lower-cased email and a hash."""
        user_service = await unit_env.get(UserService)

        user = await user_service.register("  Alice@Example.COM ", "Alice", "secret")

        assert user.email.root == "alice@example.com"
        assert user.name.root == "Alice"
        assert user.password_hash != "secret"
        assert user.password_hash.startswith("$argon2")

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, unit_env):
        """A second registration with the same email should conflict."""
        user_service = await unit_env.get(UserService)
        await user_service.register("alice@example.com", "Alice", "secret")

        with pytest.raises(ConflictError):
            await user_service.register("ALICE@example.com", "Other", "secret")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,name,password",
        [
            ("", "Alice", "secret"),
            ("alice@example.com", "", "secret"),
            ("alice@example.com", "Alice", ""),
            ("not-an-email", "Alice", "secret"),
            ("alice@example.com", "x" * 51, "secret"),
        ],
    )
    async def test_invalid_fields_raise_validation_error(
        self, unit_env, email, name, password
    ):
        """Missing or malformed fields should be rejected."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await user_service.register(email, name, password)


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_correct_credentials(self, unit_env):
        """The right password should return the user."""
        user_service = await unit_env.get(UserService)
        registered = await user_service.register("bob@example.com", "Bob", "hunter2")

        user = await user_service.authenticate("BOB@example.com", "hunter2")

        assert user.id == registered.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [
            ("bob@example.com", "wrong"),
            ("nobody@example.com", "hunter2"),
            ("garbage", "hunter2"),
        ],
    )
    async def test_wrong_credentials(self, unit_env, email, password):
        """Unknown emails and wrong passwords should fail the same way."""
        user_service = await unit_env.get(UserService)
        await user_service.register("bob@example.com", "Bob", "hunter2")

        with pytest.raises(NotAuthenticatedError, match="Invalid email or password"):
            await user_service.authenticate(email, password)


class TestGetProfile:
    """Tests for get_profile."""

    @pytest.mark.asyncio
    async def test_profile_statistics(self, unit_env):
        """The profile should count posts, comments and likes received."""
        # Arrange
        user_service = await unit_env.get(UserService)
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        user = await user_service.register("carol@example.com", "Carol", "pw")
        posts = [
            await post_repo.save(make_post(user, f"Post {i}", created_at=at(i)))
            for i in range(7)
        ]
        await comment_repo.save(make_comment(posts[0], user))
        await comment_repo.save(make_comment(posts[1], user))
        for post in posts[:3]:
            await vote_service.toggle_vote(
                VotableType.POST, post.id, UserId(uuid4()), VoteKind.LIKE
            )
        await vote_service.toggle_vote(
            VotableType.POST, posts[3].id, UserId(uuid4()), VoteKind.DISLIKE
        )

        # Act
        profile = await user_service.get_profile(user.id)

        # Assert
        assert profile.post_count == 7
        assert profile.comment_count == 2
        assert profile.likes_received == 3
        assert [s.post.title for s in profile.recent_posts] == [
            "Post 6",
            "Post 5",
            "Post 4",
            "Post 3",
            "Post 2",
        ]

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        """Profiles of unknown users should fail."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_profile(UserId(uuid4()))


class TestAuthServices:
    """Tests for password hashing and JWT handling."""

    def test_password_round_trip(self):
        """A hash should verify its own password and nothing else."""
        password_service = PasswordService()

        hashed = password_service.hash_password("s3cret")

        assert password_service.verify_password("s3cret", hashed)
        assert not password_service.verify_password("S3cret", hashed)

    def test_token_carries_user_claims(self):
        """Tokens should carry the user ID, email and name."""
        jwt_service = JWTService(AuthSettings(jwt_secret="x" * 32))

        token = jwt_service.create_token("user-1", "a@example.com", "A")
        payload = jwt_service.verify_token(token)

        assert payload.user_id == "user-1"
        assert payload.email == "a@example.com"
        assert payload.name == "A"

    def test_foreign_token_is_rejected(self):
        """Tokens signed with another secret should not verify."""
        issuer = JWTService(AuthSettings(jwt_secret="a" * 32))
        verifier = JWTService(AuthSettings(jwt_secret="b" * 32))
        token = issuer.create_token("user-1", "a@example.com", "A")

        with pytest.raises(JWTError):
            verifier.verify_token(token)
        assert verifier.get_user_id_from_token(token) is None
        assert verifier.get_user_id_from_token(None) is None

    def test_expired_token_is_rejected(self):
        """Tokens past their expiry should not verify."""
        jwt_service = JWTService(AuthSettings(jwt_secret="x" * 32, jwt_expiry_days=-1))

        token = jwt_service.create_token("user-1", "a@example.com", "A")

        assert jwt_service.get_user_id_from_token(token) is None
