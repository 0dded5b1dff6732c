"""
Orders API Dependencies
"""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from src.dependencies import get_order_repo
from src.orders.application.services.order_service import OrderService
from src.orders.domain.protocols import IOrderRepository


def get_order_service(
    orders: Annotated[IOrderRepository, Depends(get_order_repo)],
) -> OrderService:
    return OrderService(orders)
