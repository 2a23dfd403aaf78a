"""Unit tests for credential token issue and verification."""

from datetime import UTC, datetime, timedelta

import jwt as pyjwt
import pytest

from quill.config import AuthSettings
from quill.domain.value import UserId
from quill.util.jwt import (
    InvalidSignatureError,
    JWTError,
    MalformedTokenError,
    TokenExpiredError,
    create_token,
    verify_token,
)

ISSUED = datetime(2026, 3, 1, 12, 0, 0, 250000, tzinfo=UTC)


@pytest.fixture
def settings() -> AuthSettings:
    return AuthSettings(jwt_secret="unit-secret")


def _encode(payload: dict, secret: str = "unit-secret", algorithm: str = "HS256") -> str:
    return pyjwt.encode(payload, secret, algorithm=algorithm)


class TestCreateToken:
    """Tests for create_token()."""

    def test_claims_use_string_subject_and_whole_seconds(self, settings):
        """Subject is a decimal string, iat is truncated, exp is 24h later."""
        token = create_token(UserId(42), settings, ISSUED)

        claims = pyjwt.decode(
            token,
            "unit-secret",
            algorithms=["HS256"],
            options={"verify_exp": False},
        )
        assert claims["sub"] == "42"
        assert claims["iat"] == int(ISSUED.replace(microsecond=0).timestamp())
        assert claims["exp"] - claims["iat"] == 24 * 3600

    def test_same_inputs_give_same_token(self, settings):
        """Issuing is a pure function of secret, clock and subject."""
        assert create_token(UserId(7), settings, ISSUED) == create_token(
            UserId(7), settings, ISSUED
        )

    def test_expiry_follows_settings(self):
        """Token lifetime comes from jwt_expiry_hours."""
        settings = AuthSettings(jwt_secret="unit-secret", jwt_expiry_hours=1)
        token = create_token(UserId(1), settings, ISSUED)

        claims = pyjwt.decode(
            token,
            "unit-secret",
            algorithms=["HS256"],
            options={"verify_exp": False},
        )
        assert claims["exp"] - claims["iat"] == 3600


class TestVerifyToken:
    """Tests for verify_token()."""

    def test_round_trip_yields_int_subject(self, settings):
        """A fresh token verifies to the same integer subject."""
        token = create_token(UserId(42), settings, ISSUED)

        payload = verify_token(token, settings, ISSUED + timedelta(minutes=5))

        assert payload.subject_id == 42
        assert isinstance(payload.subject_id, int)
        assert payload.expires_at - payload.issued_at == timedelta(hours=24)

    def test_valid_one_second_before_expiry(self, settings):
        """Token is still valid just before the 24h mark."""
        token = create_token(UserId(1), settings, ISSUED)
        issued = ISSUED.replace(microsecond=0)

        payload = verify_token(
            token, settings, issued + timedelta(hours=24) - timedelta(seconds=1)
        )

        assert payload.subject_id == 1

    def test_expired_exactly_at_expiry(self, settings):
        """now == exp counts as expired."""
        token = create_token(UserId(1), settings, ISSUED)
        issued = ISSUED.replace(microsecond=0)

        with pytest.raises(TokenExpiredError):
            verify_token(token, settings, issued + timedelta(hours=24))

    def test_expired_after_expiry(self, settings):
        """Tokens older than 24h are rejected."""
        token = create_token(UserId(1), settings, ISSUED)

        with pytest.raises(TokenExpiredError):
            verify_token(token, settings, ISSUED + timedelta(hours=25))

    def test_wrong_secret_is_invalid_signature(self, settings):
        """A token signed with another secret is rejected."""
        token = _encode({"sub": "1", "iat": 1, "exp": 2**31}, secret="other-secret")

        with pytest.raises(InvalidSignatureError):
            verify_token(token, settings, ISSUED)

    def test_wrong_algorithm_is_invalid_signature(self, settings):
        """Tokens signed with an unexpected algorithm are rejected."""
        token = _encode({"sub": "1", "iat": 1, "exp": 2**31}, algorithm="HS512")

        with pytest.raises(InvalidSignatureError):
            verify_token(token, settings, ISSUED)

    @pytest.mark.parametrize(
        "token",
        ["", "not-a-jwt", "a.b.c", "eyJhbGciOiJIUzI1NiJ9.e30"],
    )
    def test_garbage_is_malformed(self, settings, token):
        """Undecodable strings are malformed."""
        with pytest.raises(MalformedTokenError):
            verify_token(token, settings, ISSUED)

    @pytest.mark.parametrize(
        "payload",
        [
            {"iat": 1, "exp": 2**31},  # no subject
            {"sub": "1", "exp": 2**31},  # no iat
            {"sub": "1", "iat": 1},  # no exp
            {"sub": "abc", "iat": 1, "exp": 2**31},  # non-numeric subject
            {"sub": "0", "iat": 1, "exp": 2**31},  # non-positive subject
            {"sub": "-5", "iat": 1, "exp": 2**31},
        ],
    )
    def test_bad_claims_are_malformed(self, settings, payload):
        """Correctly signed tokens with missing or bad claims are malformed."""
        with pytest.raises(MalformedTokenError):
            verify_token(_encode(payload), settings, ISSUED)

    def test_errors_share_a_base_class(self):
        """Callers can catch every verification failure as JWTError."""
        for error in (MalformedTokenError, InvalidSignatureError, TokenExpiredError):
            assert issubclass(error, JWTError)
