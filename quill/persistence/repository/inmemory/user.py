"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from quill.domain.model.user import User
from quill.domain.repository.user import UserRepository
from quill.domain.value import UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._store.users.values():
            if user.username == username:
                return user
        return None

    async def create(
        self, username: Username, password_hash: str, name: Optional[str] = None
    ) -> User:
        """Create a user.

        Raises:
            IntegrityError: If the username is already taken
        """
        if await self.find_by_username(username):
            raise IntegrityError("Duplicate username", None, Exception())

        user = User(
            id=UserId(self._store.next_id("users")),
            username=username,
            password_hash=password_hash,
            name=name,
        )
        self._store.users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        """Update an existing user."""
        self._store.users[user.id] = user
        return user
