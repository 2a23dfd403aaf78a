"""Unit tests for IdentityResolver."""

from datetime import UTC, datetime, timedelta

import pytest

from quill.config import AuthSettings
from quill.domain.model.access import (
    Authenticated,
    Unauthenticated,
    UnauthenticatedReason,
)
from quill.domain.service import IdentityResolver, JWTService
from quill.domain.value import UserId

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def jwt_service(auth_settings: AuthSettings) -> JWTService:
    return JWTService(auth_settings, clock=lambda: NOW)


@pytest.fixture
def resolver(jwt_service: JWTService) -> IdentityResolver:
    return IdentityResolver(jwt_service)


class TestExtractToken:
    """Tests for IdentityResolver.extract_token()."""

    @pytest.mark.parametrize(
        "header, expected",
        [
            (None, None),
            ("", None),
            ("Bearer ", None),
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("abc.def.ghi", "abc.def.ghi"),
            # Prefix match is case-sensitive
            ("bearer abc", "bearer abc"),
        ],
    )
    def test_extract(self, header, expected):
        assert IdentityResolver.extract_token(header) == expected


class TestResolve:
    """Tests for IdentityResolver.resolve()."""

    def test_missing_header(self, resolver):
        """No header means MISSING."""
        assert resolver.resolve(None) == Unauthenticated(
            reason=UnauthenticatedReason.MISSING
        )

    def test_bearer_token(self, resolver, jwt_service):
        """A valid Bearer token resolves to its subject."""
        token = jwt_service.create_token(UserId(42))

        result = resolver.resolve(f"Bearer {token}")

        assert result == Authenticated(subject_id=42)

    def test_bare_token_same_as_bearer(self, resolver, jwt_service):
        """A bare token resolves exactly like the Bearer form."""
        token = jwt_service.create_token(UserId(42))

        assert resolver.resolve(token) == resolver.resolve(f"Bearer {token}")

    def test_malformed(self, resolver):
        """Garbage resolves to MALFORMED."""
        result = resolver.resolve("Bearer not-a-token")

        assert isinstance(result, Unauthenticated)
        assert result.reason == UnauthenticatedReason.MALFORMED

    def test_invalid_signature(self, resolver):
        """A token signed with another secret resolves to INVALID_SIGNATURE."""
        other = JWTService(
            AuthSettings(jwt_secret="someone-else"), clock=lambda: NOW
        )
        token = other.create_token(UserId(42))

        result = resolver.resolve(f"Bearer {token}")

        assert result == Unauthenticated(reason=UnauthenticatedReason.INVALID_SIGNATURE)

    def test_expired(self, auth_settings, resolver):
        """A token issued 25h ago resolves to EXPIRED."""
        old = JWTService(auth_settings, clock=lambda: NOW - timedelta(hours=25))
        token = old.create_token(UserId(42))

        result = resolver.resolve(f"Bearer {token}")

        assert result == Unauthenticated(reason=UnauthenticatedReason.EXPIRED)

    def test_resolution_is_repeatable(self, resolver, jwt_service):
        """Resolving the same header twice gives the same outcome."""
        header = f"Bearer {jwt_service.create_token(UserId(3))}"

        assert resolver.resolve(header) == resolver.resolve(header)
