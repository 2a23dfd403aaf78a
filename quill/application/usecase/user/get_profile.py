"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase, CamelModel
from quill.domain.model import User
from quill.domain.service import UserService
from quill.domain.value import UserId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: int  # Always the authenticated subject


class ProfileResponse(CamelModel):
    """Public profile fields. The password hash is never included."""

    id: int
    username: str
    name: str | None
    bio: str | None
    avatar_url: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "ProfileResponse":
        return cls(
            id=user.id,
            username=user.username.root,
            name=user.name,
            bio=user.bio,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )


class GetProfileUseCase(BaseUseCase):
    """Use case for reading the caller's own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Load the profile.

        Raises:
            NotFoundError: If the subject no longer exists
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return ProfileResponse.from_user(user)
