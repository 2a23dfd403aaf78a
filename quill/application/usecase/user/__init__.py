"""User use cases."""

from .get_profile import GetProfileRequest, GetProfileUseCase, ProfileResponse
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileResponse",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
