"""
Get All Orders Query
"""
from __future__ import annotations

from dataclasses import dataclass

from src.orders.domain import messages
from src.orders.domain.protocols.order_repository_protocol import IOrderRepository
from src.shared.application.base_query import BaseQuery
from src.shared.application.query_handler import QueryHandler
from src.shared.application.response import WorkflowResponse


@dataclass(frozen=True)
class GetAllOrdersQuery(BaseQuery):
    pass


class GetAllOrdersQueryHandler(QueryHandler[GetAllOrdersQuery]):
    """Every order, newest first."""

    failure_message = messages.ORDERS_FETCH_FAILED

    def __init__(self, orders: IOrderRepository) -> None:
        self.orders = orders

    async def handle(self, query: GetAllOrdersQuery) -> WorkflowResponse:
        orders = await self.orders.find(order_by="created_at", descending=True)
        return WorkflowResponse.ok([order.to_dict() for order in orders])
