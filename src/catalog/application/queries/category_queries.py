"""
Category Queries
"""
from __future__ import annotations

from dataclasses import dataclass

from src.catalog.domain import messages
from src.catalog.domain.protocols.category_repository_protocol import ICategoryRepository
from src.shared.application.base_query import BaseQuery
from src.shared.application.query_handler import QueryHandler
from src.shared.application.response import WorkflowResponse


@dataclass(frozen=True)
class ListCategoriesQuery(BaseQuery):
    pass


@dataclass(frozen=True)
class GetCategoryQuery(BaseQuery):
    slug: str


class ListCategoriesQueryHandler(QueryHandler[ListCategoriesQuery]):
    failure_message = messages.CATEGORY_LIST_FAILED

    def __init__(self, categories: ICategoryRepository) -> None:
        self.categories = categories

    async def handle(self, query: ListCategoriesQuery) -> WorkflowResponse:
        categories = await self.categories.list_all()
        return WorkflowResponse.ok(
            {
                "success": True,
                "message": messages.CATEGORY_LIST,
                "category": [c.to_dict() for c in categories],
            }
        )


class GetCategoryQueryHandler(QueryHandler[GetCategoryQuery]):
    failure_message = messages.CATEGORY_SINGLE_FAILED

    def __init__(self, categories: ICategoryRepository) -> None:
        self.categories = categories

    async def handle(self, query: GetCategoryQuery) -> WorkflowResponse:
        category = await self.categories.get_by_slug(query.slug)
        return WorkflowResponse.ok(
            {
                "success": True,
                "message": messages.CATEGORY_SINGLE,
                "category": category.to_dict() if category else None,
            }
        )
