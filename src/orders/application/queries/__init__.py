"""
Orders Application Queries
"""
from src.orders.application.queries.get_all_orders_query import (
    GetAllOrdersQuery,
    GetAllOrdersQueryHandler,
)
from src.orders.application.queries.get_buyer_orders_query import (
    GetBuyerOrdersQuery,
    GetBuyerOrdersQueryHandler,
)

__all__ = [
    "GetAllOrdersQuery",
    "GetAllOrdersQueryHandler",
    "GetBuyerOrdersQuery",
    "GetBuyerOrdersQueryHandler",
]
