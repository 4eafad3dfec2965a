"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel

from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListBestPostsRequest,
    ListBestPostsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    ListSuperBestPostsResponse,
    ListSuperBestPostsUseCase,
    PostItem,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from board.domain.error import DomainError
from board.domain.repository import PostSortOrder
from board.domain.service import JWTService
from board.interface.api.errors import to_http_exception
from board.interface.api.session import optional_user_id, require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class PostAPIRequest(BaseModel):
    """API request for creating or updating a post.

    Length and emptiness rules are enforced by the domain so that every
    violation is reported the same way.
    """

    title: str | None = None
    content: str | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1, alias="pageSize"),
    search: str | None = None,
    sort: PostSortOrder = PostSortOrder.LATEST,
) -> ListPostsResponse:
    """List posts with search, sorting and pagination.

    Args:
        list_posts_use_case: List posts use case from DI
        page: 1-based page number
        page_size: Posts per page
        search: Case-insensitive substring of title or content
        sort: latest, oldest, likes or comments

    Returns:
        One page of posts with total counts
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(page=page, page_size=page_size, search=search, sort=sort)
    )


@router.get("/best", response_model=ListPostsResponse)
async def list_best_posts(
    list_best_posts_use_case: FromDishka[ListBestPostsUseCase],
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1, alias="pageSize"),
    search: str | None = None,
) -> ListPostsResponse:
    """List liked posts, most liked first.

    Args:
        list_best_posts_use_case: Best posts use case from DI
        page: 1-based page number
        page_size: Posts per page
        search: Case-insensitive substring of title or content

    Returns:
        One page of the like leaderboard
    """
    return await list_best_posts_use_case.execute(
        ListBestPostsRequest(page=page, page_size=page_size, search=search)
    )


@router.get("/super-best", response_model=ListSuperBestPostsResponse)
async def list_super_best_posts(
    list_super_best_posts_use_case: FromDishka[ListSuperBestPostsUseCase],
) -> ListSuperBestPostsResponse:
    """Top of the like leaderboard.

    Returns:
        The most liked posts
    """
    return await list_super_best_posts_use_case.execute()


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Create a new post.

    Requires authentication.

    Args:
        request: Post title and content
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Optional Bearer token header

    Returns:
        Created post

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = require_user_id(
        jwt_service, auth_token, authorization, "Authentication required to post"
    )

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                title=request.title, content=request.content, author_id=user_id
            )
        )
    except DomainError as e:
        logfire.warn("Post creation rejected", error=str(e), user_id=user_id)
        raise to_http_exception(e)


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetPostResponse:
    """Get a post with its counts, the viewer's vote and the comment tree.

    Authentication is optional; signed-in viewers see their own votes.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Optional Bearer token header

    Returns:
        Post details with comments

    Raises:
        HTTPException: 404 if the post does not exist
    """
    try:
        return await get_post_use_case.execute(
            GetPostRequest(
                post_id=str(post_id),
                viewer_id=optional_user_id(jwt_service, auth_token, authorization),
            )
        )
    except DomainError as e:
        logfire.warn("Post lookup failed", error=str(e), post_id=str(post_id))
        raise to_http_exception(e)


@router.put("/{post_id}", response_model=PostItem)
async def update_post(
    post_id: UUID,
    request: PostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Replace a post's title and content.

    Only the author may edit a post.

    Args:
        post_id: Post UUID
        request: New title and content
        update_post_use_case: Update post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Optional Bearer token header

    Returns:
        Updated post

    Raises:
        HTTPException: 401, 403, 404 or 400
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id),
                user_id=user_id,
                title=request.title,
                content=request.content,
            )
        )
    except DomainError as e:
        logfire.warn("Post update rejected", error=str(e), post_id=str(post_id))
        raise to_http_exception(e)


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post together with its comments and votes.

    Only the author may delete a post.

    Args:
        post_id: Post UUID
        delete_post_use_case: Delete post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Optional Bearer token header

    Returns:
        Confirmation message

    Raises:
        HTTPException: 401, 403 or 404
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        logfire.warn("Post deletion rejected", error=str(e), post_id=str(post_id))
        raise to_http_exception(e)
