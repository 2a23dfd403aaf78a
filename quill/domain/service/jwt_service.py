"""JWT token domain service."""

from datetime import UTC, datetime
from typing import Callable

import logfire

from quill.config import AuthSettings
from quill.domain.value import UserId
from quill.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class JWTService(Service):
    """Domain service for issuing and verifying credential tokens.

    Verification is stateless: a token stays valid until it expires, there
    is no revocation list.
    """

    def __init__(self, auth_settings: AuthSettings, clock: Clock = utc_now) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
            clock: Source of the current time
        """
        self.auth_settings = auth_settings
        self.clock = clock

    def create_token(self, user_id: UserId) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, self.auth_settings, self.clock())
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload with an integer subject id

        Raises:
            JWTError: If token is malformed, badly signed or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings, self.clock())
            except JWTError as e:
                logfire.info(
                    "JWT token verification failed",
                    error_type=type(e).__name__,
                )
                raise
            logfire.debug("JWT token verified", user_id=payload.subject_id)
            return payload
