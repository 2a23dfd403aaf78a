"""Route dependencies for required and optional authentication."""

from fastapi import HTTPException, Request, status

from quill.domain.model.access import (
    Authenticated,
    AuthResult,
    Unauthenticated,
    UnauthenticatedReason,
)
from quill.domain.value import UserId


def get_auth_result(request: Request) -> AuthResult:
    """Identity outcome attached by ``IdentityMiddleware``."""
    return getattr(
        request.state,
        "auth",
        Unauthenticated(reason=UnauthenticatedReason.MISSING),
    )


def require_subject(request: Request) -> UserId:
    """Return the authenticated subject or fail the request with 401.

    The response is the same whatever the reason: no token, a malformed
    token, a bad signature or an expired token.

    Raises:
        HTTPException: 401 with ``WWW-Authenticate: Bearer``
    """
    auth = get_auth_result(request)
    if isinstance(auth, Authenticated):
        return auth.subject_id

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


def optional_subject(request: Request) -> UserId | None:
    """Return the authenticated subject, or None for anonymous callers."""
    auth = get_auth_result(request)
    return auth.subject_id if isinstance(auth, Authenticated) else None
