"""Catalog API Schemas"""
from src.catalog.api.schemas.catalog_schemas import (
    CategoryRequest,
    ProductFilterRequest,
    ProductRequest,
)

__all__ = ["CategoryRequest", "ProductFilterRequest", "ProductRequest"]
