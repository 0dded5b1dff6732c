"""Orders Domain Entities"""
from src.orders.domain.entities.order import Order, OrderStatus

__all__ = ["Order", "OrderStatus"]
