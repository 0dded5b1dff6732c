"""Orders API Schemas"""
from src.orders.api.schemas.order_schemas import OrderStatusRequest

__all__ = ["OrderStatusRequest"]
