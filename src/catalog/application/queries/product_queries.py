"""
Product Queries
Storefront read side of the catalog
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence
from uuid import UUID

from fastapi import status

from src.catalog.domain import messages
from src.catalog.domain.protocols.category_repository_protocol import ICategoryRepository
from src.catalog.domain.protocols.product_repository_protocol import IProductRepository
from src.shared.application.base_query import BaseQuery
from src.shared.application.query_handler import QueryHandler
from src.shared.application.response import WorkflowResponse


@dataclass(frozen=True)
class ListProductsQuery(BaseQuery):
    limit: int = messages.PRODUCT_LIST_LIMIT


@dataclass(frozen=True)
class GetProductQuery(BaseQuery):
    slug: str


@dataclass(frozen=True)
class FilterProductsQuery(BaseQuery):
    """
    Attributes:
        checked: Category ids; ignored when empty
        radio: `[min, max]` price range; ignored when empty
    """
    checked: Sequence[str] = field(default_factory=tuple)
    radio: Sequence[float] = field(default_factory=tuple)


@dataclass(frozen=True)
class CountProductsQuery(BaseQuery):
    pass


@dataclass(frozen=True)
class RelatedProductsQuery(BaseQuery):
    product_id: UUID
    category_id: UUID
    limit: int = messages.RELATED_PRODUCT_LIMIT


@dataclass(frozen=True)
class ProductsByCategoryQuery(BaseQuery):
    slug: str


@dataclass(frozen=True)
class SearchProductsQuery(BaseQuery):
    keyword: str


class ListProductsQueryHandler(QueryHandler[ListProductsQuery]):
    """Newest products first, capped at `limit`."""

    failure_message = messages.PRODUCT_LIST_FAILED

    def __init__(self, products: IProductRepository) -> None:
        self.products = products

    async def handle(self, query: ListProductsQuery) -> WorkflowResponse:
        products = await self.products.list_recent(query.limit)
        return WorkflowResponse.ok(
            {
                "success": True,
                "counTotal": len(products),
                "message": messages.PRODUCT_LIST,
                "products": [p.to_dict() for p in products],
            }
        )


class GetProductQueryHandler(QueryHandler[GetProductQuery]):
    failure_message = messages.PRODUCT_SINGLE_FAILED

    def __init__(self, products: IProductRepository) -> None:
        self.products = products

    async def handle(self, query: GetProductQuery) -> WorkflowResponse:
        product = await self.products.get_by_slug(query.slug)
        return WorkflowResponse.ok(
            {
                "success": True,
                "message": messages.PRODUCT_SINGLE,
                "product": product.to_dict() if product else None,
            }
        )


class FilterProductsQueryHandler(QueryHandler[FilterProductsQuery]):
    failure_status = status.HTTP_400_BAD_REQUEST
    failure_message = messages.PRODUCT_FILTER_FAILED

    def __init__(self, products: IProductRepository) -> None:
        self.products = products

    async def handle(self, query: FilterProductsQuery) -> WorkflowResponse:
        category_ids = [UUID(str(c)) for c in query.checked]
        price_range: Optional[Sequence[float]] = None
        if query.radio:
            low, high = query.radio
            price_range = (float(low), float(high))

        products = await self.products.filter(category_ids, price_range)
        return WorkflowResponse.ok({"success": True, "products": [p.to_dict() for p in products]})


class CountProductsQueryHandler(QueryHandler[CountProductsQuery]):
    failure_status = status.HTTP_400_BAD_REQUEST
    failure_message = messages.PRODUCT_COUNT_FAILED

    def __init__(self, products: IProductRepository) -> None:
        self.products = products

    async def handle(self, query: CountProductsQuery) -> WorkflowResponse:
        return WorkflowResponse.ok({"success": True, "total": await self.products.count()})


class RelatedProductsQueryHandler(QueryHandler[RelatedProductsQuery]):
    failure_status = status.HTTP_400_BAD_REQUEST
    failure_message = messages.PRODUCT_RELATED_FAILED

    def __init__(self, products: IProductRepository) -> None:
        self.products = products

    async def handle(self, query: RelatedProductsQuery) -> WorkflowResponse:
        products = await self.products.related(query.product_id, query.category_id, query.limit)
        return WorkflowResponse.ok({"success": True, "products": [p.to_dict() for p in products]})


class ProductsByCategoryQueryHandler(QueryHandler[ProductsByCategoryQuery]):
    failure_status = status.HTTP_400_BAD_REQUEST
    failure_message = messages.PRODUCT_BY_CATEGORY_FAILED

    def __init__(self, categories: ICategoryRepository, products: IProductRepository) -> None:
        self.categories = categories
        self.products = products

    async def handle(self, query: ProductsByCategoryQuery) -> WorkflowResponse:
        category = await self.categories.get_by_slug(query.slug)
        products = await self.products.list_by_category(category.id) if category else []
        return WorkflowResponse.ok(
            {
                "success": True,
                "category": category.to_dict() if category else None,
                "products": [p.to_dict() for p in products],
            }
        )


class SearchProductsQueryHandler(QueryHandler[SearchProductsQuery]):
    """Keyword lookup over name and description; the body is a bare list."""

    failure_status = status.HTTP_400_BAD_REQUEST
    failure_message = messages.PRODUCT_SEARCH_FAILED

    def __init__(self, products: IProductRepository) -> None:
        self.products = products

    async def handle(self, query: SearchProductsQuery) -> WorkflowResponse:
        products = await self.products.search(query.keyword)
        return WorkflowResponse.ok([p.to_dict() for p in products])
