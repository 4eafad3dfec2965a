"""Integration tests for the PostgreSQL repositories.

These tests need a migrated database at ``DATABASE__URL``
(``python scripts/run_migrations.py``) and are skipped otherwise.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from board.domain.model import Vote
from board.domain.repository import (
    CommentRepository,
    PostRepository,
    PostSortOrder,
    UserRepository,
    VoteRepository,
)
from board.domain.value import VotableType, VoteId, VoteKind
from tests.conftest import at, make_comment, make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("DATABASE__URL"), reason="DATABASE__URL is not set"
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


async def _seed(integration_env):
    user_repo = await integration_env.get(UserRepository)
    post_repo = await integration_env.get(PostRepository)
    author = await user_repo.save(make_user("pg", email=f"{uuid4()}@example.com"))
    post = await post_repo.save(
        make_post(author, title=f"pg {uuid4()}", content="100% _literal_")
    )
    return author, post


def _vote(user_id, post_id, kind=VoteKind.LIKE) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id,
        votable_type=VotableType.POST,
        votable_id=post_id,
        kind=kind,
    )


class TestPostgresRepositories:
    """Integration tests against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_integrity_error(self, integration_env):
        """The unique email key should surface as IntegrityError."""
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(make_user("dup", email=f"{uuid4()}@example.com"))

        with pytest.raises(IntegrityError):
            await user_repo.save(make_user("dup2", email=user.email.root))

        # The savepoint keeps the request transaction usable
        assert await user_repo.find_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_duplicate_vote_raises_integrity_error(self, integration_env):
        """A second vote by the same user should violate the unique key."""
        author, post = await _seed(integration_env)
        vote_repo = await integration_env.get(VoteRepository)

        await vote_repo.save(_vote(author.id, post.id))
        with pytest.raises(IntegrityError):
            await vote_repo.save(_vote(author.id, post.id, VoteKind.DISLIKE))

        counts = await vote_repo.count_by_votables(VotableType.POST, [post.id])
        assert counts[post.id] == {VoteKind.LIKE: 1}

    @pytest.mark.asyncio
    async def test_delete_subtree_counts_and_cascades(self, integration_env):
        """Deleting a root should remove its replies and their votes."""
        author, post = await _seed(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        vote_repo = await integration_env.get(VoteRepository)
        c1 = await comment_repo.save(make_comment(post, author, created_at=at(1)))
        c2 = await comment_repo.save(
            make_comment(post, author, parent=c1, created_at=at(2))
        )
        c3 = await comment_repo.save(
            make_comment(post, author, parent=c2, created_at=at(3))
        )
        await vote_repo.save(
            Vote(
                id=VoteId(uuid4()),
                user_id=author.id,
                votable_type=VotableType.COMMENT,
                votable_id=c3.id,
                kind=VoteKind.LIKE,
            )
        )

        removed = await comment_repo.delete_subtree(c1.id)

        assert removed == 3
        assert await comment_repo.find_by_post(post.id) == []
        counts = await vote_repo.count_by_votables(VotableType.COMMENT, [c3.id])
        assert counts == {}

    @pytest.mark.asyncio
    async def test_summary_counts_and_literal_search(self, integration_env):
        """Summaries should count votes; search should treat % and _ literally."""
        author, post = await _seed(integration_env)
        post_repo = await integration_env.get(PostRepository)
        vote_repo = await integration_env.get(VoteRepository)
        user_repo = await integration_env.get(UserRepository)
        other = await user_repo.save(make_user("pg2", email=f"{uuid4()}@example.com"))
        await vote_repo.save(_vote(author.id, post.id))
        await vote_repo.save(_vote(other.id, post.id, VoteKind.DISLIKE))

        summary = await post_repo.find_summary(post.id)
        found = await post_repo.find_page(
            search="100% _LITERAL_", sort=PostSortOrder.LIKES, limit=100
        )

        assert summary.like_count == 1
        assert summary.dislike_count == 1
        assert post.id in [s.post.id for s in found]
        assert await post_repo.count(search="100x") == 0
