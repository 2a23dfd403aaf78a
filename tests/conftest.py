"""Test configuration and fixtures."""

import os

# Must be set before any Settings() is created
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

import logfire  # noqa: E402
import pytest  # noqa: E402

from quill.config import AuthSettings  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings matching the environment configured above."""
    return AuthSettings(jwt_secret="test-secret", bcrypt_rounds=4)
