"""
Get Buyer Orders Query
"""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.orders.domain import messages
from src.orders.domain.protocols.order_repository_protocol import IOrderRepository
from src.shared.application.base_query import BaseQuery
from src.shared.application.query_handler import QueryHandler
from src.shared.application.response import WorkflowResponse


@dataclass(frozen=True)
class GetBuyerOrdersQuery(BaseQuery):
    buyer_id: UUID


class GetBuyerOrdersQueryHandler(QueryHandler[GetBuyerOrdersQuery]):
    """The caller's own orders, in store order."""

    failure_message = messages.ORDERS_FETCH_FAILED

    def __init__(self, orders: IOrderRepository) -> None:
        self.orders = orders

    async def handle(self, query: GetBuyerOrdersQuery) -> WorkflowResponse:
        orders = await self.orders.find(buyer_id=query.buyer_id)
        return WorkflowResponse.ok([order.to_dict() for order in orders])
