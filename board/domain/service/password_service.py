"""Password hashing domain service."""

import logfire
from passlib.context import CryptContext

from .base import Service

# argon2 has no 72-byte input limit, unlike bcrypt
_pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordService(Service):
    """Domain service for hashing and verifying passwords."""

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            Encoded argon2 hash
        """
        with logfire.span("password_service.hash_password"):
            return _pwd_context.hash(password)

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Args:
            password: Plaintext password
            password_hash: Stored hash

        Returns:
            True if the password matches
        """
        with logfire.span("password_service.verify_password"):
            return _pwd_context.verify(password, password_hash)
