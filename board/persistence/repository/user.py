"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import Email, UserId
from board.persistence.mappers import row_to_user, user_to_dict
from board.persistence.tables import comments_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by normalized email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert a user inside a savepoint.

        Raises:
            IntegrityError: If the email is already registered
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return user

    async def count_comments(self, user_id: UserId) -> int:
        """Count comments written by a user."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.author_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
