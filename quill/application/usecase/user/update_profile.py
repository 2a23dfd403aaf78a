"""Update user profile use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import UserService
from quill.domain.value import UserId

from .get_profile import ProfileResponse


class UpdateProfileRequest(BaseModel):
    """Update profile request. None leaves a field unchanged."""

    user_id: int
    name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    password: str | None = None


class UpdateProfileUseCase(BaseUseCase):
    """Use case for updating the caller's own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Apply the update and return the new profile.

        Raises:
            NotFoundError: If the subject no longer exists
        """
        user = await self.user_service.update_profile(
            user_id=UserId(request.user_id),
            name=request.name,
            bio=request.bio,
            avatar_url=request.avatar_url,
            password=request.password,
        )
        return ProfileResponse.from_user(user)
