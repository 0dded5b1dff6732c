"""
Product Commands
Create, update and delete catalog products
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union
from uuid import UUID

from fastapi import status

from src.catalog.domain import messages
from src.catalog.domain.protocols.product_repository_protocol import IProductRepository
from src.shared.application.base_command import BaseCommand, is_blank
from src.shared.application.command_handler import CommandHandler
from src.shared.application.response import WorkflowResponse
from src.shared.exceptions import MissingFieldError
from src.shared.infrastructure.observability.logger import get_logger
from src.shared.utils.strings import slugify

logger = get_logger(__name__)


@dataclass(frozen=True)
class SaveProductCommand(BaseCommand):
    """
    Product fields as sent by the admin UI.

    `product_id` is None when creating.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[float, str]] = None
    category: Optional[str] = None
    quantity: Optional[Union[int, str]] = None
    shipping: Optional[bool] = None
    product_id: Optional[UUID] = None


@dataclass(frozen=True)
class DeleteProductCommand(BaseCommand):
    product_id: UUID


# Checked in this order; only the first missing field is reported.
REQUIRED_FIELDS = (
    ("name", messages.PRODUCT_NAME_REQUIRED),
    ("description", messages.PRODUCT_DESCRIPTION_REQUIRED),
    ("price", messages.PRODUCT_PRICE_REQUIRED),
    ("category", messages.PRODUCT_CATEGORY_REQUIRED),
    ("quantity", messages.PRODUCT_QUANTITY_REQUIRED),
)


def product_values(command: SaveProductCommand) -> dict[str, Any]:
    """
    Validate presence and convert to column values.

    Raises:
        MissingFieldError: 500 `{"error": "<Field> is Required"}`
        ValueError: malformed price, quantity or category id
    """
    for field_name, message in REQUIRED_FIELDS:
        if is_blank(getattr(command, field_name)):
            raise MissingFieldError(
                field_name,
                message,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                body={"error": message},
            )

    return {
        "name": command.name,
        "slug": slugify(command.name),
        "description": command.description,
        "price": float(command.price),
        "category_id": UUID(str(command.category)),
        "quantity": int(command.quantity),
        "shipping": bool(command.shipping),
    }


class CreateProductCommandHandler(CommandHandler[SaveProductCommand]):
    failure_message = messages.PRODUCT_CREATE_FAILED

    def __init__(self, products: IProductRepository) -> None:
        self.products = products

    async def handle(self, command: SaveProductCommand) -> WorkflowResponse:
        product = await self.products.create(product_values(command))
        logger.info("Product created", product_id=str(product.id), slug=product.slug)
        return WorkflowResponse.created(
            {"success": True, "message": messages.PRODUCT_CREATED, "products": product.to_dict()}
        )


class UpdateProductCommandHandler(CommandHandler[SaveProductCommand]):
    failure_message = messages.PRODUCT_UPDATE_FAILED

    def __init__(self, products: IProductRepository) -> None:
        self.products = products

    async def handle(self, command: SaveProductCommand) -> WorkflowResponse:
        values = product_values(command)
        product = await self.products.update_by_id(command.product_id, values, return_new=True)
        logger.info("Product updated", product_id=str(command.product_id), found=product is not None)
        return WorkflowResponse.created(
            {
                "success": True,
                "message": messages.PRODUCT_UPDATED,
                "products": product.to_dict() if product else None,
            }
        )


class DeleteProductCommandHandler(CommandHandler[DeleteProductCommand]):
    failure_message = messages.PRODUCT_DELETE_FAILED

    def __init__(self, products: IProductRepository) -> None:
        self.products = products

    async def handle(self, command: DeleteProductCommand) -> WorkflowResponse:
        await self.products.delete_by_id(command.product_id)
        return WorkflowResponse.ok({"success": True, "message": messages.PRODUCT_DELETED})
