"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.user import User
from quill.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
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
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's login name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(
        self, username: Username, password_hash: str, name: Optional[str] = None
    ) -> User:
        """Create a user and assign its ID.

        Args:
            username: Unique login name
            password_hash: bcrypt hash of the password
            name: Optional display name

        Returns:
            The created user

        Raises:
            IntegrityError: If the username is already taken
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Update an existing user.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
