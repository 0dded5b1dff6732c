"""
Order Service
"""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from src.orders.application.commands.update_order_status_command import (
    UpdateOrderStatusCommand,
    UpdateOrderStatusCommandHandler,
)
from src.orders.application.queries.get_all_orders_query import (
    GetAllOrdersQuery,
    GetAllOrdersQueryHandler,
)
from src.orders.application.queries.get_buyer_orders_query import (
    GetBuyerOrdersQuery,
    GetBuyerOrdersQueryHandler,
)
from src.orders.domain.protocols.order_repository_protocol import IOrderRepository
from src.shared.application.response import WorkflowResponse


class OrderService:
    """Entry points for the order lifecycle workflows."""

    def __init__(self, orders: IOrderRepository) -> None:
        self._buyer_orders = GetBuyerOrdersQueryHandler(orders)
        self._all_orders = GetAllOrdersQueryHandler(orders)
        self._update_status = UpdateOrderStatusCommandHandler(orders)

    async def orders_for(self, buyer_id: UUID) -> WorkflowResponse:
        return await self._buyer_orders(
            GetBuyerOrdersQuery(buyer_id=buyer_id, requested_by=buyer_id)
        )

    async def all_orders(self, requested_by: Optional[UUID] = None) -> WorkflowResponse:
        return await self._all_orders(GetAllOrdersQuery(requested_by=requested_by))

    async def set_status(
        self,
        order_id: UUID,
        status: Optional[str],
        issued_by: Optional[UUID] = None,
    ) -> WorkflowResponse:
        return await self._update_status(
            UpdateOrderStatusCommand(order_id=order_id, status=status, issued_by=issued_by)
        )
