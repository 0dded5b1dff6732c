"""
Catalog API Dependencies
"""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from src.catalog.application.services.category_service import CategoryService
from src.catalog.application.services.product_service import ProductService
from src.catalog.domain.protocols import ICategoryRepository, IProductRepository
from src.dependencies import get_category_repo, get_product_repo


def get_category_service(
    categories: Annotated[ICategoryRepository, Depends(get_category_repo)],
) -> CategoryService:
    return CategoryService(categories)


def get_product_service(
    products: Annotated[IProductRepository, Depends(get_product_repo)],
    categories: Annotated[ICategoryRepository, Depends(get_category_repo)],
) -> ProductService:
    return ProductService(products, categories)
