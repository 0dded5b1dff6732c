"""
Product Repository Protocol (Interface)
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence
from uuid import UUID

from src.catalog.domain.entities.product import Product


class IProductRepository(Protocol):
    async def create(self, values: Mapping[str, Any]) -> Product: ...

    async def get_by_slug(self, slug: str) -> Optional[Product]: ...

    async def list_recent(self, limit: int) -> list[Product]: ...

    async def filter(
        self,
        category_ids: Sequence[UUID] = (),
        price_range: Optional[Sequence[float]] = None,
    ) -> list[Product]: ...

    async def count(self) -> int: ...

    async def related(self, product_id: UUID, category_id: UUID, limit: int) -> list[Product]: ...

    async def list_by_category(self, category_id: UUID) -> list[Product]: ...

    async def search(self, keyword: str) -> list[Product]: ...

    async def update_by_id(
        self,
        product_id: UUID,
        values: Mapping[str, Any],
        *,
        return_new: bool = False,
    ) -> Optional[Product]: ...

    async def delete_by_id(self, product_id: UUID) -> bool: ...
