"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_best_posts import (
    ListBestPostsRequest,
    ListBestPostsUseCase,
    ListSuperBestPostsResponse,
    ListSuperBestPostsUseCase,
)
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase, PostItem
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListBestPostsRequest",
    "ListBestPostsUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "ListSuperBestPostsResponse",
    "ListSuperBestPostsUseCase",
    "PostItem",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
