"""
Orders Infrastructure - ORM Models
"""
from src.orders.infrastructure.persistence.models.order_model import OrderModel, order_products

__all__ = ["OrderModel", "order_products"]
