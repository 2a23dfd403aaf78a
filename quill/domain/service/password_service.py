"""Password hashing domain service."""

import bcrypt

from quill.config import AuthSettings

from .base import Service

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class PasswordService(Service):
    """One-way password hashing with bcrypt."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize password service.

        Args:
            auth_settings: Authentication settings (bcrypt work factor)
        """
        self.rounds = auth_settings.bcrypt_rounds

    def hash_password(self, password: str) -> str:
        """Hash a plain text password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            bcrypt hash

        Raises:
            ValueError: If the password is longer than 72 bytes
        """
        pwd_bytes = password.encode("utf-8")
        if len(pwd_bytes) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        hashed = bcrypt.hashpw(pwd_bytes, bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plain text password against a bcrypt hash."""
        pwd_bytes = password.encode("utf-8")
        if len(pwd_bytes) > MAX_PASSWORD_BYTES:
            return False
        return bcrypt.checkpw(pwd_bytes, password_hash.encode("utf-8"))
