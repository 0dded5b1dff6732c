"""
Order Repository Protocol (Interface)
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence
from uuid import UUID

from src.orders.domain.entities.order import Order


class IOrderRepository(Protocol):
    async def create(
        self,
        buyer_id: UUID,
        product_ids: Sequence[UUID],
        status: Optional[str] = None,
    ) -> Order:
        """Place an order for `buyer_id` over existing products"""
        ...

    async def find(
        self,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        **filters: Any,
    ) -> list[Order]:
        """Orders matching filters, products and buyer expanded"""
        ...

    async def get_by_id(self, order_id: UUID) -> Optional[Order]: ...

    async def update_by_id(
        self,
        order_id: UUID,
        values: Mapping[str, Any],
        *,
        return_new: bool = False,
    ) -> Optional[Order]:
        ...
