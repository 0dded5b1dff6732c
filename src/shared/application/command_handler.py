"""
Base Command Handler
Abstract base for all command handlers, and the workflow boundary guard
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Generic, TypeVar

from fastapi import status

from src.shared.application.base_command import BaseCommand
from src.shared.application.response import WorkflowResponse
from src.shared.exceptions import ValidationError
from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TCommand = TypeVar("TCommand", bound=BaseCommand)

# Opaque payload attached to generic failures; internal detail stays in the logs.
OPAQUE_ERROR = {"code": "internal_error"}


async def run_guarded(
    name: str,
    operation: Callable[[], Awaitable[WorkflowResponse]],
    failure_status: int,
    failure_message: str,
) -> WorkflowResponse:
    """
    Execute a workflow so that nothing escapes its boundary.

    - ValidationError -> its own response (expected, logged at info)
    - any other exception -> generic failure response (logged with traceback)
    """
    try:
        return await operation()
    except ValidationError as e:
        logger.info("Workflow rejected input", workflow=name, reason=e.message)
        return WorkflowResponse(status_code=e.status_code, body=e.body)
    except Exception as e:
        logger.exception("Workflow failed", workflow=name, error_type=type(e).__name__)
        return WorkflowResponse.failure(failure_status, failure_message, error=dict(OPAQUE_ERROR))


class CommandHandler(ABC, Generic[TCommand]):
    """
    Abstract base class for command handlers.

    Subclasses implement `handle`; callers invoke the handler itself, which
    converts every fault into a `WorkflowResponse` carrying
    `failure_status` / `failure_message`.

    Example:
        class RegisterUserCommandHandler(CommandHandler[RegisterUserCommand]):
            failure_message = "Errro in Registeration"

            async def handle(self, command) -> WorkflowResponse:
                ...
    """

    failure_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    failure_message: str = "Request failed"

    @abstractmethod
    async def handle(self, command: TCommand) -> WorkflowResponse:
        """
        Handle the command and return its outcome.

        Raises:
            ValidationError: If command data is invalid
        """

    async def __call__(self, command: TCommand) -> WorkflowResponse:
        command_name = command.__class__.__name__
        logger.debug("Executing command", command=command_name)

        response = await run_guarded(
            command_name,
            lambda: self.handle(command),
            self.failure_status,
            self.failure_message,
        )

        logger.info(
            "Command completed",
            command=command_name,
            status_code=response.status_code,
            success=response.success,
        )
        return response
