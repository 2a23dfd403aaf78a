"""Signup use case."""

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase, CamelModel
from quill.domain.service import JWTService, UserService
from quill.domain.value import Username


class SignupRequest(BaseModel):
    """Signup request."""

    username: str
    password: str
    name: str | None = None


class SignupResponse(CamelModel):
    """Signup response carrying the first credential token."""

    token: str
    user_id: int


class SignupUseCase(BaseUseCase):
    """Use case for registering a user and issuing a token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            jwt_service: JWT service for issuing tokens
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Register the user and sign them in.

        Args:
            request: Signup request

        Returns:
            Token and new user ID

        Raises:
            ConflictError: If the username is taken
        """
        with logfire.span("signup.execute", username=request.username):
            user = await self.user_service.register(
                username=Username(request.username),
                password=request.password,
                name=request.name,
            )
            token = self.jwt_service.create_token(user.id)
            return SignupResponse(token=token, user_id=user.id)
