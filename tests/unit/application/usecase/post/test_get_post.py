"""Unit tests for the post use cases."""

from uuid import uuid4

import pytest

from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from board.application.usecase.vote import ToggleVoteRequest, ToggleVoteUseCase
from board.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from board.domain.repository import UserRepository
from board.domain.value import VotableType, VoteKind
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create_post(unit_env, title: str = "제목", content: str = "내용"):
    user_repo = await unit_env.get(UserRepository)
    create_post = await unit_env.get(CreatePostUseCase)
    author = await user_repo.save(make_user("poster"))
    post = await create_post.execute(
        CreatePostRequest(title=title, content=content, author_id=str(author.id))
    )
    return author, post


class TestPostUseCases:
    """Tests for creating, reading, updating and deleting posts."""

    @pytest.mark.asyncio
    async def test_create_post_starts_with_zero_counts(self, unit_env):
        """A new post should have no comments and no votes."""
        author, post = await _create_post(unit_env)

        assert post.title == "제목"
        assert post.content == "내용"
        assert post.author_id == str(author.id)
        assert post.author_name == "poster"
        assert (post.comment_count, post.like_count, post.dislike_count) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_create_post_without_title(self, unit_env):
        """A missing title should be a validation error."""
        with pytest.raises(ValidationError):
            await _create_post(unit_env, title="")

    @pytest.mark.asyncio
    async def test_get_post_reports_viewer_vote(self, unit_env):
        """The viewer's own like should be flagged, not anyone else's."""
        # Arrange
        get_post = await unit_env.get(GetPostUseCase)
        toggle_vote = await unit_env.get(ToggleVoteUseCase)
        _, post = await _create_post(unit_env)
        viewer = str(uuid4())
        await toggle_vote.execute(
            ToggleVoteRequest(
                votable_type=VotableType.POST,
                votable_id=post.post_id,
                kind=VoteKind.LIKE,
                user_id=viewer,
            )
        )

        # Act
        as_viewer = await get_post.execute(
            GetPostRequest(post_id=post.post_id, viewer_id=viewer)
        )
        anonymous = await get_post.execute(GetPostRequest(post_id=post.post_id))

        # Assert
        assert as_viewer.like_count == 1
        assert as_viewer.is_liked
        assert not as_viewer.is_disliked
        assert anonymous.like_count == 1
        assert not anonymous.is_liked
        assert as_viewer.comments == []
        assert as_viewer.total_comments == 0

    @pytest.mark.asyncio
    async def test_update_by_author(self, unit_env):
        """The author should be able to edit the post."""
        update_post = await unit_env.get(UpdatePostUseCase)
        author, post = await _create_post(unit_env)

        updated = await update_post.execute(
            UpdatePostRequest(
                post_id=post.post_id,
                user_id=str(author.id),
                title="New",
                content="Body",
            )
        )

        assert updated.title == "New"
        assert updated.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_delete_by_stranger(self, unit_env):
        """Deleting another user's post should be forbidden."""
        delete_post = await unit_env.get(DeletePostUseCase)
        _, post = await _create_post(unit_env)

        with pytest.raises(NotAuthorizedError):
            await delete_post.execute(
                DeletePostRequest(post_id=post.post_id, user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_delete_then_get(self, unit_env):
        """A deleted post should no longer be found."""
        delete_post = await unit_env.get(DeletePostUseCase)
        get_post = await unit_env.get(GetPostUseCase)
        list_posts = await unit_env.get(ListPostsUseCase)
        author, post = await _create_post(unit_env)

        response = await delete_post.execute(
            DeletePostRequest(post_id=post.post_id, user_id=str(author.id))
        )

        assert response.message == "Post deleted"
        with pytest.raises(NotFoundError):
            await get_post.execute(GetPostRequest(post_id=post.post_id))
        listing = await list_posts.execute(ListPostsRequest())
        assert listing.total_count == 0
