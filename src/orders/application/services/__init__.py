"""Orders Application Services"""
from src.orders.application.services.order_service import OrderService

__all__ = ["OrderService"]
