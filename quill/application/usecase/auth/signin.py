"""Signin use case."""

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase, CamelModel
from quill.domain.service import JWTService, UserService
from quill.domain.value import Username


class SigninRequest(BaseModel):
    """Signin request."""

    username: str
    password: str


class SigninResponse(CamelModel):
    """Signin response."""

    token: str
    user_id: int


class SigninUseCase(BaseUseCase):
    """Use case for exchanging a username/password for a token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize signin use case.

        Args:
            user_service: User domain service
            jwt_service: JWT service for issuing tokens
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SigninRequest) -> SigninResponse:
        """Check credentials and issue a token.

        Raises:
            InvalidCredentialsError: If the username/password pair doesn't match
        """
        with logfire.span("signin.execute", username=request.username):
            user = await self.user_service.authenticate(
                Username(request.username), request.password
            )
            token = self.jwt_service.create_token(user.id)
            return SigninResponse(token=token, user_id=user.id)
