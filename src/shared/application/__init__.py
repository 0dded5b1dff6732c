"""
Shared Application Layer
CQRS contracts, handlers, and the workflow response type
"""
from src.shared.application.base_command import BaseCommand, is_blank
from src.shared.application.base_query import BaseQuery
from src.shared.application.command_handler import CommandHandler, run_guarded
from src.shared.application.query_handler import QueryHandler
from src.shared.application.response import WorkflowResponse

__all__ = [
    "BaseCommand",
    "BaseQuery",
    "CommandHandler",
    "QueryHandler",
    "WorkflowResponse",
    "is_blank",
    "run_guarded",
]
