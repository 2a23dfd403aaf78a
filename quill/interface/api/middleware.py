"""Request identity middleware."""

from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from quill.domain.service import IdentityResolver


class IdentityMiddleware(BaseHTTPMiddleware):
    """Resolves the caller's identity and stores it on ``request.state.auth``.

    Never rejects a request and never touches the database: routes decide
    whether an identity is required through the dependencies in
    ``quill.interface.api.auth``.
    """

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        container = request.app.state.dishka_container
        resolver = await container.get(IdentityResolver)

        request.state.auth = resolver.resolve(request.headers.get("Authorization"))

        return await call_next(request)
