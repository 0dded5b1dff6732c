"""
User Repository Implementation
"""
from __future__ import annotations

from typing import Any, Mapping, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.identity.domain.entities.user import User
from src.identity.domain.exception import DuplicateEmailException
from src.identity.infrastructure.persistence.models.user_model import UserModel
from src.shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository
from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

_CREATE_FIELDS = ("name", "email", "password", "phone", "address", "answer", "role")


class UserRepository(SQLAlchemyRepository[User, UserModel]):
    """User repository implementation."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session=session, model_class=UserModel)

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity"""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            phone=model.phone,
            address=model.address,
            answer=model.answer,
            role=model.role,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def create(self, fields: Mapping[str, Any]) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateEmailException: the email is already taken
        """
        values = {key: fields[key] for key in _CREATE_FIELDS if key in fields}
        try:
            user = await self.insert(values)
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateEmailException(values.get("email", ""))

        logger.info("User created", user_id=str(user.id), role=user.role)
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Returns:
            User if found, None otherwise
        """
        return await self.get_one(email=email)

    async def get_by_email_and_answer(self, email: str, answer: str) -> Optional[User]:
        """Get user whose email and security answer both match exactly."""
        return await self.get_one(email=email, answer=answer)
