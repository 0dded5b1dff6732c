"""
Category Repository Protocol (Interface)
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol
from uuid import UUID

from src.catalog.domain.entities.category import Category


class ICategoryRepository(Protocol):
    async def create(self, name: str, slug: str) -> Category: ...

    async def get_by_name(self, name: str) -> Optional[Category]: ...

    async def get_by_slug(self, slug: str) -> Optional[Category]: ...

    async def list_all(self) -> list[Category]: ...

    async def update_by_id(
        self,
        category_id: UUID,
        values: Mapping[str, Any],
        *,
        return_new: bool = False,
    ) -> Optional[Category]: ...

    async def delete_by_id(self, category_id: UUID) -> bool: ...
