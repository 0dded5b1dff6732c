"""
Catalog API Routes
"""
from src.catalog.api.routes.category import router as category_router
from src.catalog.api.routes.product import router as product_router

__all__ = ["category_router", "product_router"]
