"""In-memory post repository for testing."""

from typing import Optional

from board.domain.model import Post, PostSummary
from board.domain.repository.post import PostRepository, PostSortOrder
from board.domain.value import PostId, UserId, VotableType, VoteKind

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _summarize(self, post: Post) -> PostSummary:
        votes = [
            v
            for v in self._store.votes.values()
            if v.votable_type == VotableType.POST and v.votable_id == post.id
        ]
        return PostSummary(
            post=post,
            comment_count=sum(
                1 for c in self._store.comments.values() if c.post_id == post.id
            ),
            like_count=sum(1 for v in votes if v.kind == VoteKind.LIKE),
            dislike_count=sum(1 for v in votes if v.kind == VoteKind.DISLIKE),
        )

    def _matching(
        self, search: Optional[str], liked_only: bool
    ) -> list[PostSummary]:
        summaries = [self._summarize(p) for p in self._store.posts.values()]
        if search:
            needle = search.lower()
            summaries = [
                s
                for s in summaries
                if needle in s.post.title.lower() or needle in s.post.content.lower()
            ]
        if liked_only:
            summaries = [s for s in summaries if s.like_count > 0]
        return summaries

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_summary(self, post_id: PostId) -> Optional[PostSummary]:
        """Find a post with its counts."""
        post = self._store.posts.get(post_id)
        return self._summarize(post) if post else None

    async def find_page(
        self,
        search: Optional[str] = None,
        sort: PostSortOrder = PostSortOrder.LATEST,
        limit: int = 10,
        offset: int = 0,
        liked_only: bool = False,
    ) -> list[PostSummary]:
        """Find a page of posts with their counts."""
        summaries = self._matching(search, liked_only)

        # Sorts are stable, so newest first breaks ties in every order
        summaries.sort(key=lambda s: s.post.created_at, reverse=True)
        if sort == PostSortOrder.OLDEST:
            summaries.sort(key=lambda s: s.post.created_at)
        elif sort == PostSortOrder.LIKES:
            summaries.sort(key=lambda s: s.like_count, reverse=True)
        elif sort == PostSortOrder.COMMENTS:
            summaries.sort(key=lambda s: s.comment_count, reverse=True)

        return summaries[offset : offset + limit]

    async def count(
        self, search: Optional[str] = None, liked_only: bool = False
    ) -> int:
        """Count posts matching the listing filters."""
        return len(self._matching(search, liked_only))

    async def find_by_author(
        self, author_id: UserId, limit: int = 5
    ) -> list[PostSummary]:
        """Find the most recent posts of an author."""
        posts = [p for p in self._store.posts.values() if p.author_id == author_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return [self._summarize(p) for p in posts[:limit]]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts written by an author."""
        return sum(1 for p in self._store.posts.values() if p.author_id == author_id)

    async def count_likes_received(self, author_id: UserId) -> int:
        """Count likes received across all posts of an author."""
        return sum(
            s.like_count
            for s in map(self._summarize, self._store.posts.values())
            if s.post.author_id == author_id
        )

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        self._store.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post with its comments and votes."""
        return self._store.delete_post(post_id)
