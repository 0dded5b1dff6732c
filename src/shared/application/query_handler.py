"""
Base Query Handler
Abstract base for all query handlers
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from fastapi import status

from src.shared.application.base_query import BaseQuery
from src.shared.application.command_handler import run_guarded
from src.shared.application.response import WorkflowResponse
from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TQuery = TypeVar("TQuery", bound=BaseQuery)


class QueryHandler(ABC, Generic[TQuery]):
    """
    Abstract base class for query handlers.

    Query handlers read from repositories without modifying state. Like
    command handlers they never raise: faults become a generic failure
    response.
    """

    failure_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    failure_message: str = "Request failed"

    @abstractmethod
    async def handle(self, query: TQuery) -> WorkflowResponse:
        """Handle the query and return its outcome."""

    async def __call__(self, query: TQuery) -> WorkflowResponse:
        query_name = query.__class__.__name__
        logger.debug("Executing query", query=query_name)

        response = await run_guarded(
            query_name,
            lambda: self.handle(query),
            self.failure_status,
            self.failure_message,
        )

        logger.debug("Query completed", query=query_name, status_code=response.status_code)
        return response
