"""Unit tests for VoteService."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from board.domain.error import NotFoundError
from board.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from board.domain.service import VoteService
from board.domain.value import PostId, UserId, VotableType, VoteKind, VoteState
from board.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _seed_post(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    author = await user_repo.save(make_user("author"))
    post = await post_repo.save(make_post(author))
    return author, post


class TestTogglePostVote:
    """Tests for toggle_vote on posts."""

    @pytest.mark.asyncio
    async def test_like_creates_vote(self, unit_env):
        """Liking should store a like and report it."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        _, post = await _seed_post(unit_env)
        voter = UserId(uuid4())

        # Act
        state = await vote_service.toggle_vote(
            VotableType.POST, post.id, voter, VoteKind.LIKE
        )

        # Assert
        assert state == VoteState(like_count=1, dislike_count=0, is_liked=True)
        saved = await vote_repo.find_by_user_and_votable(
            voter, VotableType.POST, post.id
        )
        assert saved is not None
        assert saved.kind == VoteKind.LIKE

    @pytest.mark.asyncio
    async def test_same_kind_twice_retracts(self, unit_env):
        """Toggling the same kind twice should return to no vote."""
        vote_service = await unit_env.get(VoteService)
        _, post = await _seed_post(unit_env)
        voter = UserId(uuid4())

        await vote_service.toggle_vote(VotableType.POST, post.id, voter, VoteKind.LIKE)
        state = await vote_service.toggle_vote(
            VotableType.POST, post.id, voter, VoteKind.LIKE
        )

        assert state == VoteState()

    @pytest.mark.asyncio
    async def test_dislike_replaces_like(self, unit_env):
        """Disliking a liked post should swap the vote."""
        vote_service = await unit_env.get(VoteService)
        _, post = await _seed_post(unit_env)
        voter = UserId(uuid4())

        await vote_service.toggle_vote(VotableType.POST, post.id, voter, VoteKind.LIKE)
        state = await vote_service.toggle_vote(
            VotableType.POST, post.id, voter, VoteKind.DISLIKE
        )

        assert state.like_count == 0
        assert state.dislike_count == 1
        assert not state.is_liked
        assert state.is_disliked

    @pytest.mark.asyncio
    async def test_votes_stay_mutually_exclusive(self, unit_env):
        """Any toggle sequence should leave at most one vote per user."""
        vote_service = await unit_env.get(VoteService)
        store = await unit_env.get(InMemoryStore)
        _, post = await _seed_post(unit_env)
        voter = UserId(uuid4())

        sequence = [
            VoteKind.LIKE,
            VoteKind.DISLIKE,
            VoteKind.DISLIKE,
            VoteKind.LIKE,
            VoteKind.DISLIKE,
        ]
        for kind in sequence:
            state = await vote_service.toggle_vote(
                VotableType.POST, post.id, voter, kind
            )
            assert not (state.is_liked and state.is_disliked)
            assert state.like_count + state.dislike_count <= 1

        assert len(store.votes) == 1
        assert state.is_disliked

    @pytest.mark.asyncio
    async def test_counts_aggregate_across_users(self, unit_env):
        """Counts should sum every user's vote, personal flags only the viewer's."""
        vote_service = await unit_env.get(VoteService)
        _, post = await _seed_post(unit_env)
        alice, bob, carol = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())

        await vote_service.toggle_vote(VotableType.POST, post.id, alice, VoteKind.LIKE)
        await vote_service.toggle_vote(VotableType.POST, post.id, bob, VoteKind.LIKE)
        await vote_service.toggle_vote(
            VotableType.POST, post.id, carol, VoteKind.DISLIKE
        )

        state = await vote_service.get_vote_state(VotableType.POST, post.id, carol)
        assert state == VoteState(like_count=2, dislike_count=1, is_disliked=True)

        anonymous = await vote_service.get_vote_state(VotableType.POST, post.id)
        assert not anonymous.is_liked
        assert not anonymous.is_disliked

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        """Voting on a missing post should fail and store nothing."""
        vote_service = await unit_env.get(VoteService)
        store = await unit_env.get(InMemoryStore)

        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.toggle_vote(
                VotableType.POST, uuid4(), UserId(uuid4()), VoteKind.LIKE
            )

        assert exc_info.value.resource == "Post"
        assert store.votes == {}

    @pytest.mark.asyncio
    async def test_lost_race_resolves_to_current_state(self, unit_env, monkeypatch):
        """A duplicate insert after a stale read should report the stored vote."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        store = await unit_env.get(InMemoryStore)
        _, post = await _seed_post(unit_env)
        voter = UserId(uuid4())
        await vote_service.toggle_vote(VotableType.POST, post.id, voter, VoteKind.LIKE)

        # The concurrent like landed after this request read the vote table
        async def stale_read(*args, **kwargs):
            return None

        monkeypatch.setattr(vote_repo, "find_by_user_and_votable", stale_read)

        state = await vote_service.toggle_vote(
            VotableType.POST, post.id, voter, VoteKind.LIKE
        )

        assert state == VoteState(like_count=1, dislike_count=0, is_liked=True)
        assert len(store.votes) == 1

    @pytest.mark.asyncio
    async def test_other_integrity_errors_propagate(self, unit_env, monkeypatch):
        """Only the one-vote-per-user key is absorbed."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        _, post = await _seed_post(unit_env)

        async def broken_save(vote):
            raise IntegrityError(
                "INSERT INTO post_votes",
                None,
                Exception('violates foreign key constraint "post_votes_user_id_fkey"'),
            )

        monkeypatch.setattr(vote_repo, "save", broken_save)

        with pytest.raises(IntegrityError):
            await vote_service.toggle_vote(
                VotableType.POST, post.id, UserId(uuid4()), VoteKind.LIKE
            )


class TestToggleCommentVote:
    """Tests for toggle_vote on comments."""

    @pytest.mark.asyncio
    async def test_like_comment(self, unit_env):
        """Liking a comment should count it for that comment only."""
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)
        comment = await comment_repo.save(make_comment(post, author))
        voter = UserId(uuid4())

        state = await vote_service.toggle_vote(
            VotableType.COMMENT, comment.id, voter, VoteKind.LIKE, post_id=post.id
        )

        assert state.like_count == 1
        post_state = await vote_service.get_vote_state(VotableType.POST, post.id)
        assert post_state == VoteState()

    @pytest.mark.asyncio
    async def test_comment_under_wrong_post_raises_not_found(self, unit_env):
        """A comment addressed under another post should be treated as missing."""
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _seed_post(unit_env)
        comment = await comment_repo.save(make_comment(post, author))

        with pytest.raises(NotFoundError):
            await vote_service.toggle_vote(
                VotableType.COMMENT,
                comment.id,
                UserId(uuid4()),
                VoteKind.LIKE,
                post_id=PostId(uuid4()),
            )


class TestGetVoteStates:
    """Tests for batch vote state reads."""

    @pytest.mark.asyncio
    async def test_every_requested_id_is_reported(self, unit_env):
        """Unknown and unvoted IDs should report zero counts."""
        vote_service = await unit_env.get(VoteService)
        _, post = await _seed_post(unit_env)
        voter = UserId(uuid4())
        missing = uuid4()
        await vote_service.toggle_vote(VotableType.POST, post.id, voter, VoteKind.LIKE)

        states = await vote_service.get_vote_states(
            VotableType.POST, [post.id, missing], voter
        )

        assert states[post.id].is_liked
        assert states[missing] == VoteState()

    @pytest.mark.asyncio
    async def test_empty_batch(self, unit_env):
        """An empty batch should not query anything."""
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_vote_states(VotableType.COMMENT, []) == {}
