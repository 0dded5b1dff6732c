"""Orders Infrastructure - Repositories"""
from src.orders.infrastructure.persistence.repositories.order_repository import OrderRepository

__all__ = ["OrderRepository"]
