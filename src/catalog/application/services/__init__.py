"""Catalog Application Services"""
from src.catalog.application.services.category_service import CategoryService
from src.catalog.application.services.product_service import ProductService

__all__ = ["CategoryService", "ProductService"]
