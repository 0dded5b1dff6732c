"""Orders Repository Protocols"""
from src.orders.domain.protocols.order_repository_protocol import IOrderRepository

__all__ = ["IOrderRepository"]
