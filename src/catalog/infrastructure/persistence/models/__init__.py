"""
Catalog Infrastructure - ORM Models
"""
from src.catalog.infrastructure.persistence.models.category_model import CategoryModel
from src.catalog.infrastructure.persistence.models.product_model import ProductModel

__all__ = ["CategoryModel", "ProductModel"]
