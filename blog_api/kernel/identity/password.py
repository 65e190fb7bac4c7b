"""
Password hashing utilities using bcrypt.
"""

from typing import Optional

import bcrypt

from blog_api.config import get_settings


class PasswordHasher:
    """Password hashing service."""

    @staticmethod
    def _encode(password: str) -> bytes:
        # bcrypt only uses the first 72 bytes
        return password.encode("utf-8")[:72]

    @staticmethod
    def hash(password: str, rounds: Optional[int] = None) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: Plain text password
            rounds: Cost factor; defaults to the configured ``bcrypt_rounds``

        Returns:
            Hashed password string
        """
        salt = bcrypt.gensalt(rounds=rounds or get_settings().bcrypt_rounds)
        return bcrypt.hashpw(PasswordHasher._encode(password), salt).decode("utf-8")

    @staticmethod
    def verify(plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        Returns:
            True if password matches, False otherwise (including malformed hashes)
        """
        try:
            return bcrypt.checkpw(
                PasswordHasher._encode(plain_password),
                hashed_password.encode("utf-8"),
            )
        except ValueError:
            return False


# Convenience functions
def hash_password(password: str) -> str:
    """Hash a password."""
    return PasswordHasher.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password."""
    return PasswordHasher.verify(plain_password, hashed_password)
