"""
Category Repository Implementation
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog.domain.entities.category import Category
from src.catalog.infrastructure.persistence.models.category_model import CategoryModel
from src.shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository


class CategoryRepository(SQLAlchemyRepository[Category, CategoryModel]):
    """Category repository implementation."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session=session, model_class=CategoryModel)

    def _to_entity(self, model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            name=model.name,
            slug=model.slug,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def create(self, name: str, slug: str) -> Category:
        return await self.insert({"name": name, "slug": slug})

    async def get_by_name(self, name: str) -> Optional[Category]:
        return await self.get_one(name=name)

    async def get_by_slug(self, slug: str) -> Optional[Category]:
        return await self.get_one(slug=slug)

    async def list_all(self) -> list[Category]:
        return await self.find()
