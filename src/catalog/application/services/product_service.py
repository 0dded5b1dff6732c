"""
Product Service
"""
from __future__ import annotations

from typing import Any, Optional, Sequence
from uuid import UUID

from src.catalog.application.commands.product_commands import (
    CreateProductCommandHandler,
    DeleteProductCommand,
    DeleteProductCommandHandler,
    SaveProductCommand,
    UpdateProductCommandHandler,
)
from src.catalog.application.queries.product_queries import (
    CountProductsQuery,
    CountProductsQueryHandler,
    FilterProductsQuery,
    FilterProductsQueryHandler,
    GetProductQuery,
    GetProductQueryHandler,
    ListProductsQuery,
    ListProductsQueryHandler,
    ProductsByCategoryQuery,
    ProductsByCategoryQueryHandler,
    RelatedProductsQuery,
    RelatedProductsQueryHandler,
    SearchProductsQuery,
    SearchProductsQueryHandler,
)
from src.catalog.domain.protocols.category_repository_protocol import ICategoryRepository
from src.catalog.domain.protocols.product_repository_protocol import IProductRepository
from src.shared.application.response import WorkflowResponse


class ProductService:
    """Entry points for the product workflows."""

    def __init__(self, products: IProductRepository, categories: ICategoryRepository) -> None:
        self._products = products
        self._categories = categories

    # ── writes (admin) ──

    async def create(self, issued_by: Optional[UUID] = None, **fields: Any) -> WorkflowResponse:
        handler = CreateProductCommandHandler(self._products)
        return await handler(SaveProductCommand(issued_by=issued_by, **fields))

    async def update(
        self,
        product_id: UUID,
        issued_by: Optional[UUID] = None,
        **fields: Any,
    ) -> WorkflowResponse:
        handler = UpdateProductCommandHandler(self._products)
        return await handler(
            SaveProductCommand(product_id=product_id, issued_by=issued_by, **fields)
        )

    async def delete(self, product_id: UUID, issued_by: Optional[UUID] = None) -> WorkflowResponse:
        handler = DeleteProductCommandHandler(self._products)
        return await handler(DeleteProductCommand(product_id=product_id, issued_by=issued_by))

    # ── reads ──

    async def list_recent(self) -> WorkflowResponse:
        return await ListProductsQueryHandler(self._products)(ListProductsQuery())

    async def get_by_slug(self, slug: str) -> WorkflowResponse:
        return await GetProductQueryHandler(self._products)(GetProductQuery(slug=slug))

    async def filter(self, checked: Sequence[str] = (), radio: Sequence[float] = ()) -> WorkflowResponse:
        handler = FilterProductsQueryHandler(self._products)
        return await handler(FilterProductsQuery(checked=tuple(checked), radio=tuple(radio)))

    async def count(self) -> WorkflowResponse:
        return await CountProductsQueryHandler(self._products)(CountProductsQuery())

    async def related(self, product_id: UUID, category_id: UUID) -> WorkflowResponse:
        handler = RelatedProductsQueryHandler(self._products)
        return await handler(RelatedProductsQuery(product_id=product_id, category_id=category_id))

    async def by_category(self, slug: str) -> WorkflowResponse:
        handler = ProductsByCategoryQueryHandler(self._categories, self._products)
        return await handler(ProductsByCategoryQuery(slug=slug))

    async def search(self, keyword: str) -> WorkflowResponse:
        handler = SearchProductsQueryHandler(self._products)
        return await handler(SearchProductsQuery(keyword=keyword))
