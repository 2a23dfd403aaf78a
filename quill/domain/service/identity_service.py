"""Identity resolution for inbound requests."""

import logfire

from quill.domain.model.access import (
    Authenticated,
    AuthResult,
    Unauthenticated,
    UnauthenticatedReason,
)
from quill.util.jwt import (
    InvalidSignatureError,
    JWTError,
    TokenExpiredError,
)

from .base import Service
from .jwt_service import JWTService

BEARER_PREFIX = "Bearer "


class IdentityResolver(Service):
    """Turns a raw Authorization header into an authentication outcome.

    Purely cryptographic: never touches persistence, so a token stays
    valid for a user who no longer exists until it expires.
    """

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize identity resolver.

        Args:
            jwt_service: JWT service used to verify tokens
        """
        self.jwt_service = jwt_service

    @staticmethod
    def extract_token(authorization: str | None) -> str | None:
        """Extract the token from an Authorization header value.

        A leading ``Bearer `` (case-sensitive) is stripped; any other value
        is taken to be the bare token.

        Args:
            authorization: Raw header value, if present

        Returns:
            Token string, or None when the header is absent or empty
        """
        if not authorization:
            return None
        if authorization.startswith(BEARER_PREFIX):
            authorization = authorization[len(BEARER_PREFIX) :]
        return authorization.strip() or None

    def resolve(self, authorization: str | None) -> AuthResult:
        """Resolve the subject a request acts as.

        Args:
            authorization: Raw Authorization header value, if present

        Returns:
            Authenticated with the subject id, or Unauthenticated with an
            internal reason
        """
        token = self.extract_token(authorization)
        if token is None:
            return Unauthenticated(reason=UnauthenticatedReason.MISSING)

        try:
            payload = self.jwt_service.verify_token(token)
        except TokenExpiredError:
            reason = UnauthenticatedReason.EXPIRED
        except InvalidSignatureError:
            reason = UnauthenticatedReason.INVALID_SIGNATURE
        except JWTError:
            reason = UnauthenticatedReason.MALFORMED
        else:
            return Authenticated(subject_id=payload.subject_id)

        logfire.info("Request credential rejected", reason=reason.value)
        return Unauthenticated(reason=reason)
