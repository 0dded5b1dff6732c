"""Catalog Infrastructure - Repositories"""
from src.catalog.infrastructure.persistence.repositories.category_repository import (
    CategoryRepository,
)
from src.catalog.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)

__all__ = ["CategoryRepository", "ProductRepository"]
