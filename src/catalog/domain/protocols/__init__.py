"""Catalog Repository Protocols"""
from src.catalog.domain.protocols.category_repository_protocol import ICategoryRepository
from src.catalog.domain.protocols.product_repository_protocol import IProductRepository

__all__ = ["ICategoryRepository", "IProductRepository"]
