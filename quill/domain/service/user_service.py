"""User domain service."""

from datetime import datetime

import logfire
from sqlalchemy.exc import IntegrityError

from quill.domain.error import ConflictError, InvalidCredentialsError, NotFoundError
from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId, Username

from .base import Service
from .password_service import PasswordService


class UserService(Service):
    """Domain service for user registration, sign-in and profiles."""

    def __init__(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
        """
        self.user_repository = user_repository
        self.password_service = password_service

    async def register(
        self, username: Username, password: str, name: str | None = None
    ) -> User:
        """Register a new user.

        Args:
            username: Desired username
            password: Plain text password
            name: Optional display name

        Returns:
            The created user

        Raises:
            ConflictError: If the username is already taken
        """
        with logfire.span("user_service.register", username=username.root):
            existing = await self.user_repository.find_by_username(username)
            if existing:
                logfire.warn("Username already taken", username=username.root)
                raise ConflictError("Username already exists")

            password_hash = self.password_service.hash_password(password)

            try:
                user = await self.user_repository.create(
                    username=username, password_hash=password_hash, name=name
                )
            except IntegrityError:
                # Lost a race with a concurrent signup for the same username
                logfire.warn("Duplicate username on insert", username=username.root)
                raise ConflictError("Username already exists")

            logfire.info("User registered", user_id=user.id, username=username.root)
            return user

    async def authenticate(self, username: Username, password: str) -> User:
        """Check a username/password pair.

        Args:
            username: Username
            password: Plain text password

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: If the user doesn't exist or the password is wrong
        """
        with logfire.span("user_service.authenticate", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if not user or not self.password_service.verify_password(
                password, user.password_hash
            ):
                logfire.warn("Sign-in rejected", username=username.root)
                raise InvalidCredentialsError()

            logfire.info("User authenticated", user_id=user.id)
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: set[UserId]) -> dict[UserId, User]:
        """Load several users at once.

        Args:
            user_ids: IDs to load

        Returns:
            Mapping of ID to user for the users that exist
        """
        users = {}
        for user_id in user_ids:
            user = await self.user_repository.find_by_id(user_id)
            if user:
                users[user_id] = user
        return users

    async def update_profile(
        self,
        user_id: UserId,
        name: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
        password: str | None = None,
    ) -> User:
        """Update a user's own profile.

        Fields left as None keep their current value.

        Args:
            user_id: User ID (always the authenticated subject)
            name: New display name
            bio: New bio
            avatar_url: New avatar URL
            password: New plain text password

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_profile", user_id=user_id):
            user = await self.get_by_id(user_id)

            updates: dict = {"updated_at": datetime.now()}
            if name is not None:
                updates["name"] = name
            if bio is not None:
                updates["bio"] = bio
            if avatar_url is not None:
                updates["avatar_url"] = avatar_url
            if password is not None:
                updates["password_hash"] = self.password_service.hash_password(password)

            saved = await self.user_repository.save(user.model_copy(update=updates))
            logfire.info(
                "Profile updated",
                user_id=user_id,
                fields=sorted(k for k in updates if k != "updated_at"),
            )
            return saved
