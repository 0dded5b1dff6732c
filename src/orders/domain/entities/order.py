"""
Order Entity
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from src.catalog.domain.entities.product import Product
from src.identity.domain.entities.user import User
from src.shared.domain.base_entity import BaseEntity


class OrderStatus:
    """
    Labels used by the storefront UI.

    Status is stored as an opaque string: any label is accepted and no
    transition order is enforced.
    """

    NOT_PROCESSED = "Not Processed"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "deliverd"
    CANCELLED = "cancel"


class Order(BaseEntity):
    """
    Purchase placed by a buyer.

    `buyer` and `products` are expansions loaded with the order; only
    `status` is ever changed after creation.
    """

    def __init__(
        self,
        id: Optional[UUID],
        buyer_id: UUID,
        status: str = OrderStatus.NOT_PROCESSED,
        buyer: Optional[User] = None,
        products: Optional[list[Product]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.buyer_id = buyer_id
        self.status = status
        self.buyer = buyer
        self.products = products or []

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "products": [_product_summary(p) for p in self.products],
            "buyer": self.buyer.to_summary() if self.buyer else str(self.buyer_id),
            "status": self.status,
            **self._audit_fields(),
        }


def _product_summary(product: Product) -> dict[str, Any]:
    summary = product.to_dict()
    summary.pop("category", None)
    return summary
