"""
Product Entity
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from src.catalog.domain.entities.category import Category
from src.shared.domain.base_entity import BaseEntity


class Product(BaseEntity):
    """
    Catalog product.

    Attributes:
        name: Display name
        slug: URL key derived from name
        description: Free text
        price: Unit price
        category_id: Owning category
        category: Expanded category, when loaded
        quantity: Units in stock
        shipping: Whether the product ships
    """

    def __init__(
        self,
        id: Optional[UUID],
        name: str,
        slug: str,
        description: str,
        price: float,
        category_id: UUID,
        quantity: int,
        shipping: bool = False,
        category: Optional[Category] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(id, created_at=created_at, updated_at=updated_at)
        self.name = name
        self.slug = slug
        self.description = description
        self.price = price
        self.category_id = category_id
        self.quantity = quantity
        self.shipping = shipping
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "price": self.price,
            "category": self.category.to_dict() if self.category else str(self.category_id),
            "quantity": self.quantity,
            "shipping": self.shipping,
            **self._audit_fields(),
        }
