"""
User Entity - Storefront Account
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from src.shared.domain.base_entity import BaseEntity


class User(BaseEntity):
    """
    Storefront account.

    The password attribute only ever holds an argon2 digest; the security
    answer is stored as entered and compared by exact match during
    password recovery.

    Attributes:
        name: Display name
        email: Login identifier (unique)
        password: Argon2id hash
        phone: Contact phone
        address: Shipping address
        answer: Security answer for password recovery
        role: 0 for buyers, anything else is privileged
    """

    BUYER = 0
    ADMIN = 1

    def __init__(
        self,
        id: Optional[UUID],
        name: str,
        email: str,
        password: str,
        phone: str,
        address: str,
        answer: str,
        role: int = BUYER,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self._name = name
        self._email = email
        self._password = password
        self._phone = phone
        self._address = address
        self._answer = answer
        self._role = role

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password(self) -> str:
        return self._password

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def address(self) -> str:
        return self._address

    @property
    def answer(self) -> str:
        return self._answer

    @property
    def role(self) -> int:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role != self.BUYER

    def to_public(self) -> dict[str, Any]:
        """Client-facing projection; never carries the hash or the answer."""
        return {
            "id": str(self.id),
            "name": self._name,
            "email": self._email,
            "phone": self._phone,
            "address": self._address,
            "role": self._role,
        }

    def to_summary(self) -> dict[str, Any]:
        return {"id": str(self.id), "name": self._name}

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self._email!r}, role={self._role})"
