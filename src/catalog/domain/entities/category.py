"""
Category Entity
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from src.shared.domain.base_entity import BaseEntity


class Category(BaseEntity):
    """Product category; `slug` is derived from `name`."""

    def __init__(
        self,
        id: Optional[UUID],
        name: str,
        slug: str,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.name = name
        self.slug = slug

    def to_dict(self) -> dict[str, Any]:
        return {"id": str(self.id), "name": self.name, "slug": self.slug}
