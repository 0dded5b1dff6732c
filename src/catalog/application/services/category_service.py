"""
Category Service
"""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from src.catalog.application.commands.category_commands import (
    CreateCategoryCommand,
    CreateCategoryCommandHandler,
    DeleteCategoryCommand,
    DeleteCategoryCommandHandler,
    UpdateCategoryCommand,
    UpdateCategoryCommandHandler,
)
from src.catalog.application.queries.category_queries import (
    GetCategoryQuery,
    GetCategoryQueryHandler,
    ListCategoriesQuery,
    ListCategoriesQueryHandler,
)
from src.catalog.domain.protocols.category_repository_protocol import ICategoryRepository
from src.shared.application.response import WorkflowResponse


class CategoryService:
    """Entry points for the category workflows."""

    def __init__(self, categories: ICategoryRepository) -> None:
        self._categories = categories

    async def create(self, name: Optional[str], issued_by: Optional[UUID] = None) -> WorkflowResponse:
        handler = CreateCategoryCommandHandler(self._categories)
        return await handler(CreateCategoryCommand(name=name, issued_by=issued_by))

    async def update(
        self,
        category_id: UUID,
        name: Optional[str],
        issued_by: Optional[UUID] = None,
    ) -> WorkflowResponse:
        handler = UpdateCategoryCommandHandler(self._categories)
        return await handler(
            UpdateCategoryCommand(category_id=category_id, name=name, issued_by=issued_by)
        )

    async def delete(self, category_id: UUID, issued_by: Optional[UUID] = None) -> WorkflowResponse:
        handler = DeleteCategoryCommandHandler(self._categories)
        return await handler(DeleteCategoryCommand(category_id=category_id, issued_by=issued_by))

    async def list_all(self) -> WorkflowResponse:
        return await ListCategoriesQueryHandler(self._categories)(ListCategoriesQuery())

    async def get_by_slug(self, slug: str) -> WorkflowResponse:
        return await GetCategoryQueryHandler(self._categories)(GetCategoryQuery(slug=slug))
