"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.user import User
from board.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by normalized email address.

        Args:
            email: The user's email

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the email is already registered
        """
        pass

    @abstractmethod
    async def count_comments(self, user_id: UserId) -> int:
        """Count comments written by a user.

        Args:
            user_id: The author's ID

        Returns:
            Number of comments
        """
        pass
