"""
Catalog Application Queries
"""
from src.catalog.application.queries.category_queries import (
    GetCategoryQuery,
    GetCategoryQueryHandler,
    ListCategoriesQuery,
    ListCategoriesQueryHandler,
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

__all__ = [
    "CountProductsQuery",
    "CountProductsQueryHandler",
    "FilterProductsQuery",
    "FilterProductsQueryHandler",
    "GetCategoryQuery",
    "GetCategoryQueryHandler",
    "GetProductQuery",
    "GetProductQueryHandler",
    "ListCategoriesQuery",
    "ListCategoriesQueryHandler",
    "ListProductsQuery",
    "ListProductsQueryHandler",
    "ProductsByCategoryQuery",
    "ProductsByCategoryQueryHandler",
    "RelatedProductsQuery",
    "RelatedProductsQueryHandler",
    "SearchProductsQuery",
    "SearchProductsQueryHandler",
]
