"""
User Repository Protocol (Interface)
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol
from uuid import UUID

from src.identity.domain.entities.user import User


class IUserRepository(Protocol):
    """User repository interface"""

    async def create(self, fields: Mapping[str, Any]) -> User:
        """Build and insert a new user from already-validated fields"""
        ...

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        ...

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by exact email"""
        ...

    async def get_by_email_and_answer(self, email: str, answer: str) -> Optional[User]:
        """Get user whose email and security answer both match exactly"""
        ...

    async def update_by_id(
        self,
        user_id: UUID,
        values: Mapping[str, Any],
        *,
        return_new: bool = False,
    ) -> Optional[User]:
        """Overwrite the given fields; returns the updated user when asked"""
        ...
