"""Auth use cases."""

from .signin import SigninRequest, SigninResponse, SigninUseCase
from .signup import SignupRequest, SignupResponse, SignupUseCase

__all__ = [
    "SigninRequest",
    "SigninResponse",
    "SigninUseCase",
    "SignupRequest",
    "SignupResponse",
    "SignupUseCase",
]
