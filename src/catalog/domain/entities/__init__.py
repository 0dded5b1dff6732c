"""Catalog Domain Entities"""
from src.catalog.domain.entities.category import Category
from src.catalog.domain.entities.product import Product

__all__ = ["Category", "Product"]
