"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from board.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from board.domain.error import DomainError
from board.domain.service import JWTService
from board.interface.api.errors import to_http_exception
from board.interface.api.session import optional_user_id, require_user_id

router = APIRouter(
    prefix="/posts/{post_id}/comments", tags=["comments"], route_class=DishkaRoute
)


class CommentAPIRequest(BaseModel):
    """API request for creating a comment.

    ``parentId`` is accepted as well as ``parent_id``.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: str | None = None
    parent_id: UUID | None = Field(default=None, alias="parentId")


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCommentsResponse:
    """Get the comment tree of a post.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Optional Bearer token header

    Returns:
        Nested comments and the total number of stored comments

    Raises:
        HTTPException: 404 if the post does not exist
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(
                post_id=str(post_id),
                viewer_id=optional_user_id(jwt_service, auth_token, authorization),
            )
        )
    except DomainError as e:
        logfire.warn("Comment listing failed", error=str(e), post_id=str(post_id))
        raise to_http_exception(e)


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: UUID,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Create a comment or a reply to another comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment content and optional parent comment
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Optional Bearer token header

    Returns:
        Created comment

    Raises:
        HTTPException: 401, 400 for empty content, 404 for unknown post or parent
    """
    user_id = require_user_id(
        jwt_service, auth_token, authorization, "Authentication required to comment"
    )

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_id),
                content=request.content,
                author_id=user_id,
                parent_id=str(request.parent_id) if request.parent_id else None,
            )
        )
    except DomainError as e:
        logfire.warn("Comment creation rejected", error=str(e), post_id=str(post_id))
        raise to_http_exception(e)


@router.delete("", response_model=DeleteCommentResponse)
async def delete_comment(
    post_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    comment_id: UUID | None = Query(default=None, alias="commentId"),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment together with all of its replies.

    Only the author may delete a comment.

    Args:
        post_id: Post UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        comment_id: Comment UUID, passed as the ``commentId`` query parameter
        auth_token: JWT token from cookie
        authorization: Optional Bearer token header

    Returns:
        Confirmation message and the number of removed comments

    Raises:
        HTTPException: 400, 401, 403 or 404
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)

    if comment_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Comment ID is required"
        )

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                post_id=str(post_id), comment_id=str(comment_id), user_id=user_id
            )
        )
    except DomainError as e:
        logfire.warn(
            "Comment deletion rejected", error=str(e), comment_id=str(comment_id)
        )
        raise to_http_exception(e)
