"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, BoardSettings
from board.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from board.domain.service import (
    CommentService,
    JWTService,
    PasswordService,
    PostService,
    UserService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_password_service(self) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService()

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        password_service: PasswordService,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            post_repository=post_repository,
            password_service=password_service,
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, board_settings: BoardSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, board_settings=board_settings
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        vote_service: VoteService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            vote_service=vote_service,
        )
