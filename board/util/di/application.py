"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from board.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from board.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListBestPostsUseCase,
    ListPostsUseCase,
    ListSuperBestPostsUseCase,
    UpdatePostUseCase,
)
from board.application.usecase.user import GetUserProfileUseCase
from board.application.usecase.vote import GetVoteStateUseCase, ToggleVoteUseCase
from board.domain.service import (
    CommentService,
    JWTService,
    PostService,
    UserService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(self, user_service: UserService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_get_post_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_list_best_posts_use_case(
        self, post_service: PostService
    ) -> ListBestPostsUseCase:
        """Provide best posts use case."""
        return ListBestPostsUseCase(post_service=post_service)

    @provide
    def get_list_super_best_posts_use_case(
        self, post_service: PostService
    ) -> ListSuperBestPostsUseCase:
        """Provide super-best posts use case."""
        return ListSuperBestPostsUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide
    def get_toggle_vote_use_case(self, vote_service: VoteService) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_service=vote_service)

    @provide
    def get_get_vote_state_use_case(
        self, vote_service: VoteService
    ) -> GetVoteStateUseCase:
        """Provide get vote state use case."""
        return GetVoteStateUseCase(vote_service=vote_service)

    # User use cases
    @provide
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)
