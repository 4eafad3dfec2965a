"""In-memory user repository for testing."""

from typing import Optional

from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import Email, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by normalized email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Insert a user.

        Raises:
            IntegrityError: If the email is already registered
        """
        self._store.insert_user(user)
        return user

    async def count_comments(self, user_id: UserId) -> int:
        """Count comments written by a user."""
        return sum(1 for c in self._store.comments.values() if c.author_id == user_id)
