"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId, Username
from quill.persistence.mappers import row_to_user, user_to_dict
from quill.persistence.tables import is_storable_id, users_table


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
        if not is_storable_id(user_id):
            return None
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def create(
        self, username: Username, password_hash: str, name: Optional[str] = None
    ) -> User:
        """Insert a user; the unique index on username raises IntegrityError."""
        stmt = (
            insert(users_table)
            .values(username=username.root, password_hash=password_hash, name=name)
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_user(dict(row))

    async def save(self, user: User) -> User:
        """Update an existing user."""
        values = user_to_dict(user)
        values.pop("id")
        values.pop("created_at")
        values["updated_at"] = datetime.now()

        stmt = (
            update(users_table)
            .where(users_table.c.id == user.id)
            .values(**values)
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_user(dict(row))
