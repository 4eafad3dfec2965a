"""Domain services."""

from .base import Service
from .comment_service import CommentService, CommentTree
from .comment_tree import MAX_TREE_DEPTH, CommentNode, build_comment_tree
from .jwt_service import JWTService
from .password_service import PasswordService
from .post_service import PostService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CommentNode",
    "CommentService",
    "CommentTree",
    "JWTService",
    "MAX_TREE_DEPTH",
    "PasswordService",
    "PostService",
    "Service",
    "UserService",
    "VoteService",
    "build_comment_tree",
]
