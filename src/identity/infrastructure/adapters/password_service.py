"""
Password Service - Hashing and Verification
External adapter for password operations
"""
from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from src.shared.infrastructure.observability.logger import get_logger
from src.shared.security.passwords.ports import PasswordHasherPort

logger = get_logger(__name__)


class PasswordService(PasswordHasherPort):
    """
    Password hashing service using Argon2id.

    Every hash carries its own random salt, so hashing the same plaintext
    twice yields different digests that both verify.
    """

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        """Initialize password service with Argon2 hasher"""
        self._hasher = hasher or PasswordHasher(
            time_cost=2,  # iterations
            memory_cost=65536,  # 64 MB
            parallelism=4,  # threads
            hash_len=32,  # output length
            salt_len=16,  # salt length
        )

    def hash_password(self, plain_password: str) -> str:
        """
        Hash a plain text password.

        Args:
            plain_password: Plain text password (no length policy here)

        Returns:
            Encoded argon2id digest

        Raises:
            argon2.exceptions.HashingError: If the hasher fails
        """
        return self._hasher.hash(plain_password)

    def compare_password(self, plain_password: str, password_hash: str) -> bool:
        """
        Verify a password against its hash.

        Returns:
            True if password matches, False otherwise (including malformed digests)
        """
        try:
            return self._hasher.verify(password_hash, plain_password)
        except VerifyMismatchError:
            return False
        except (VerificationError, InvalidHashError):
            logger.warning("Password digest could not be verified")
            return False
