"""
Product Repository Implementation
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog.domain.entities.product import Product
from src.catalog.infrastructure.persistence.models.product_model import ProductModel
from src.catalog.infrastructure.persistence.repositories.category_repository import (
    CategoryRepository,
)
from src.shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository

_WRITABLE = ("name", "slug", "description", "price", "category_id", "quantity", "shipping")


class ProductRepository(SQLAlchemyRepository[Product, ProductModel]):
    """
    Product repository implementation.

    Every returned product carries its expanded category.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session=session, model_class=ProductModel)
        self._categories = CategoryRepository(session)

    def _to_entity(self, model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            price=model.price,
            category_id=model.category_id,
            quantity=model.quantity,
            shipping=bool(model.shipping),
            category=self._categories._to_entity(model.category) if model.category else None,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def create(self, values: Mapping[str, Any]) -> Product:
        return await self.insert({k: v for k, v in values.items() if k in _WRITABLE})

    async def get_by_slug(self, slug: str) -> Optional[Product]:
        return await self.get_one(slug=slug)

    async def list_recent(self, limit: int) -> list[Product]:
        """Newest first."""
        return await self.find(order_by="created_at", descending=True, limit=limit)

    async def filter(
        self,
        category_ids: Sequence[UUID] = (),
        price_range: Optional[Sequence[float]] = None,
    ) -> list[Product]:
        """
        Products in any of `category_ids` (when given) priced within the
        inclusive `[min, max]` range (when given).
        """
        stmt = self._select()
        if category_ids:
            stmt = stmt.where(ProductModel.category_id.in_(list(category_ids)))
        if price_range:
            low, high = price_range[0], price_range[1]
            stmt = stmt.where(ProductModel.price >= low, ProductModel.price <= high)

        result = await self.session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().unique().all()]

    async def related(self, product_id: UUID, category_id: UUID, limit: int) -> list[Product]:
        """Other products of the same category."""
        stmt = (
            self._select()
            .where(ProductModel.category_id == category_id, ProductModel.id != product_id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().unique().all()]

    async def list_by_category(self, category_id: UUID) -> list[Product]:
        return await self.find(category_id=category_id)

    async def search(self, keyword: str) -> list[Product]:
        """Case-insensitive substring match on name or description."""
        stmt = self._select().where(
            or_(
                ProductModel.name.icontains(keyword, autoescape=True),
                ProductModel.description.icontains(keyword, autoescape=True),
            )
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().unique().all()]
