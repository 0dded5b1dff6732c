"""
Category Commands
Create, rename and delete categories
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import status

from src.catalog.domain import messages
from src.catalog.domain.protocols.category_repository_protocol import ICategoryRepository
from src.shared.application.base_command import BaseCommand, is_blank
from src.shared.application.command_handler import CommandHandler
from src.shared.application.response import WorkflowResponse
from src.shared.exceptions import MissingFieldError
from src.shared.infrastructure.observability.logger import get_logger
from src.shared.utils.strings import slugify

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreateCategoryCommand(BaseCommand):
    name: Optional[str] = None


@dataclass(frozen=True)
class UpdateCategoryCommand(BaseCommand):
    category_id: UUID
    name: Optional[str] = None


@dataclass(frozen=True)
class DeleteCategoryCommand(BaseCommand):
    category_id: UUID


class CreateCategoryCommandHandler(CommandHandler[CreateCategoryCommand]):
    """An existing name is reported as a successful no-op."""

    failure_message = messages.CATEGORY_CREATE_FAILED

    def __init__(self, categories: ICategoryRepository) -> None:
        self.categories = categories

    async def handle(self, command: CreateCategoryCommand) -> WorkflowResponse:
        if is_blank(command.name):
            raise MissingFieldError(
                "name",
                messages.CATEGORY_NAME_REQUIRED,
                status_code=status.HTTP_401_UNAUTHORIZED,
                body={"message": messages.CATEGORY_NAME_REQUIRED},
            )

        if await self.categories.get_by_name(command.name) is not None:
            return WorkflowResponse.ok({"success": True, "message": messages.CATEGORY_EXISTS})

        category = await self.categories.create(command.name, slugify(command.name))
        logger.info("Category created", category_id=str(category.id), slug=category.slug)
        return WorkflowResponse.created(
            {
                "success": True,
                "message": messages.CATEGORY_CREATED,
                "category": category.to_dict(),
            }
        )


class UpdateCategoryCommandHandler(CommandHandler[UpdateCategoryCommand]):
    failure_message = messages.CATEGORY_UPDATE_FAILED

    def __init__(self, categories: ICategoryRepository) -> None:
        self.categories = categories

    async def handle(self, command: UpdateCategoryCommand) -> WorkflowResponse:
        if is_blank(command.name):
            raise ValueError("category name missing")

        category = await self.categories.update_by_id(
            command.category_id,
            {"name": command.name, "slug": slugify(command.name)},
            return_new=True,
        )
        return WorkflowResponse.ok(
            {
                "success": True,
                "message": messages.CATEGORY_UPDATED,
                "category": category.to_dict() if category else None,
            }
        )


class DeleteCategoryCommandHandler(CommandHandler[DeleteCategoryCommand]):
    failure_message = messages.CATEGORY_DELETE_FAILED

    def __init__(self, categories: ICategoryRepository) -> None:
        self.categories = categories

    async def handle(self, command: DeleteCategoryCommand) -> WorkflowResponse:
        deleted = await self.categories.delete_by_id(command.category_id)
        logger.info("Category deleted", category_id=str(command.category_id), found=deleted)
        return WorkflowResponse.ok({"success": True, "message": messages.CATEGORY_DELETED})
