"""
Orders API Routes
"""
from src.orders.api.routes.orders import router as orders_router

__all__ = ["orders_router"]
