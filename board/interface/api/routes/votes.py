"""Like and dislike routes for posts and comments.

``GET`` reads the current counts; ``POST`` toggles the caller's vote and
returns the counts after the change.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from board.application.usecase.vote import (
    GetVoteStateRequest,
    GetVoteStateUseCase,
    ToggleVoteRequest,
    ToggleVoteUseCase,
    VoteStateResponse,
)
from board.domain.error import DomainError
from board.domain.service import JWTService
from board.domain.value import VotableType, VoteKind
from board.interface.api.errors import to_http_exception
from board.interface.api.session import optional_user_id, require_user_id

router = APIRouter(prefix="/posts", tags=["votes"], route_class=DishkaRoute)


async def _read(
    use_case: GetVoteStateUseCase,
    jwt_service: JWTService,
    votable_type: VotableType,
    votable_id: UUID,
    auth_token: str | None,
    authorization: str | None,
) -> VoteStateResponse:
    return await use_case.execute(
        GetVoteStateRequest(
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            viewer_id=optional_user_id(jwt_service, auth_token, authorization),
        )
    )


async def _toggle(
    use_case: ToggleVoteUseCase,
    jwt_service: JWTService,
    votable_type: VotableType,
    votable_id: UUID,
    kind: VoteKind,
    auth_token: str | None,
    authorization: str | None,
    post_id: UUID | None = None,
) -> VoteStateResponse:
    user_id = require_user_id(
        jwt_service,
        auth_token,
        authorization,
        f"Authentication required to {kind.value}",
    )

    try:
        return await use_case.execute(
            ToggleVoteRequest(
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                kind=kind,
                user_id=user_id,
                post_id=str(post_id) if post_id else None,
            )
        )
    except DomainError as e:
        logfire.warn(
            "Vote rejected",
            error=str(e),
            votable_type=votable_type.value,
            votable_id=str(votable_id),
        )
        raise to_http_exception(e)


@router.get("/{post_id}/like", response_model=VoteStateResponse)
async def get_post_likes(
    post_id: UUID,
    use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteStateResponse:
    """Read a post's vote counts and the caller's own vote."""
    return await _read(
        use_case, jwt_service, VotableType.POST, post_id, auth_token, authorization
    )


@router.post("/{post_id}/like", response_model=VoteStateResponse)
async def like_post(
    post_id: UUID,
    use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteStateResponse:
    """Toggle the caller's like on a post.

    A like replaces an earlier dislike; liking twice removes the like.
    """
    return await _toggle(
        use_case,
        jwt_service,
        VotableType.POST,
        post_id,
        VoteKind.LIKE,
        auth_token,
        authorization,
    )


@router.get("/{post_id}/dislike", response_model=VoteStateResponse)
async def get_post_dislikes(
    post_id: UUID,
    use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteStateResponse:
    """Read a post's vote counts and the caller's own vote."""
    return await _read(
        use_case, jwt_service, VotableType.POST, post_id, auth_token, authorization
    )


@router.post("/{post_id}/dislike", response_model=VoteStateResponse)
async def dislike_post(
    post_id: UUID,
    use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteStateResponse:
    """Toggle the caller's dislike on a post."""
    return await _toggle(
        use_case,
        jwt_service,
        VotableType.POST,
        post_id,
        VoteKind.DISLIKE,
        auth_token,
        authorization,
    )


@router.get(
    "/{post_id}/comments/{comment_id}/like", response_model=VoteStateResponse
)
async def get_comment_likes(
    post_id: UUID,
    comment_id: UUID,
    use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteStateResponse:
    """Read a comment's vote counts and the caller's own vote."""
    return await _read(
        use_case,
        jwt_service,
        VotableType.COMMENT,
        comment_id,
        auth_token,
        authorization,
    )


@router.post(
    "/{post_id}/comments/{comment_id}/like", response_model=VoteStateResponse
)
async def like_comment(
    post_id: UUID,
    comment_id: UUID,
    use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteStateResponse:
    """Toggle the caller's like on a comment of the given post."""
    return await _toggle(
        use_case,
        jwt_service,
        VotableType.COMMENT,
        comment_id,
        VoteKind.LIKE,
        auth_token,
        authorization,
        post_id=post_id,
    )


@router.get(
    "/{post_id}/comments/{comment_id}/dislike", response_model=VoteStateResponse
)
async def get_comment_dislikes(
    post_id: UUID,
    comment_id: UUID,
    use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteStateResponse:
    """Read a comment's vote counts and the caller's own vote."""
    return await _read(
        use_case,
        jwt_service,
        VotableType.COMMENT,
        comment_id,
        auth_token,
        authorization,
    )


@router.post(
    "/{post_id}/comments/{comment_id}/dislike", response_model=VoteStateResponse
)
async def dislike_comment(
    post_id: UUID,
    comment_id: UUID,
    use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteStateResponse:
    """Toggle the caller's dislike on a comment of the given post."""
    return await _toggle(
        use_case,
        jwt_service,
        VotableType.COMMENT,
        comment_id,
        VoteKind.DISLIKE,
        auth_token,
        authorization,
        post_id=post_id,
    )
