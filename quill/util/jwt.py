"""JWT token utilities.

Tokens carry three claims: ``sub`` (the subject id as a decimal string),
``iat`` and ``exp`` (whole-second UNIX timestamps). Expiry is checked
against the caller's clock rather than PyJWT's, so the validity window is
exact and testable.
"""

from datetime import UTC, datetime, timedelta

import jwt
from pydantic import BaseModel, Field, ValidationError

from quill.config import AuthSettings
from quill.domain.value import UserId


class TokenPayload(BaseModel):
    """JWT token payload."""

    subject_id: UserId = Field(gt=0)
    issued_at: datetime
    expires_at: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


class MalformedTokenError(JWTError):
    """Token cannot be decoded or lacks the expected claims."""

    pass


class InvalidSignatureError(JWTError):
    """Token signature does not match the configured secret."""

    pass


class TokenExpiredError(JWTError):
    """Token is past its expiry time."""

    pass


def create_token(user_id: UserId, settings: AuthSettings, now: datetime) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        settings: Authentication settings
        now: Issue time (truncated to whole seconds)

    Returns:
        Encoded JWT token
    """
    issued_at = now.astimezone(UTC).replace(microsecond=0)
    expires_at = issued_at + timedelta(hours=settings.jwt_expiry_hours)

    payload = {
        "sub": str(user_id),
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings, now: datetime) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings
        now: Current time used for the expiry check

    Returns:
        Token payload if valid

    Raises:
        MalformedTokenError: If the token is not a decodable JWT with sub/iat/exp
        InvalidSignatureError: If the signature does not verify
        TokenExpiredError: If ``now`` is at or past the expiry time
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={
                "require": ["sub", "iat", "exp"],
                "verify_exp": False,
                "verify_iat": False,
            },
        )
    except jwt.InvalidSignatureError:
        raise InvalidSignatureError("Invalid token signature")
    except jwt.InvalidAlgorithmError:
        raise InvalidSignatureError("Token signed with unexpected algorithm")
    except jwt.InvalidTokenError as e:
        raise MalformedTokenError(f"Malformed token: {e}")

    try:
        payload = TokenPayload(
            subject_id=claims["sub"],
            issued_at=datetime.fromtimestamp(int(claims["iat"]), UTC),
            expires_at=datetime.fromtimestamp(int(claims["exp"]), UTC),
        )
    except (TypeError, ValueError, OverflowError, ValidationError) as e:
        raise MalformedTokenError(f"Malformed token claims: {e}")

    if now.astimezone(UTC) >= payload.expires_at:
        raise TokenExpiredError("Token has expired")

    return payload
