"""
Identity Domain Exceptions
"""
from __future__ import annotations

from uuid import UUID


class IdentityDomainException(Exception):
    """Base exception for identity domain"""
    pass


class UserNotFoundException(IdentityDomainException):
    """Raised when a record the caller refers to no longer exists"""

    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class DuplicateEmailException(IdentityDomainException):
    """Raised when the store rejects a second account for an email"""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already registered: {email}")
