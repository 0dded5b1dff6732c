"""
Update Order Status Command
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from src.orders.domain import messages
from src.orders.domain.protocols.order_repository_protocol import IOrderRepository
from src.shared.application.base_command import BaseCommand
from src.shared.application.command_handler import CommandHandler
from src.shared.application.response import WorkflowResponse
from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpdateOrderStatusCommand(BaseCommand):
    order_id: UUID
    status: Optional[str] = None


class UpdateOrderStatusCommandHandler(CommandHandler[UpdateOrderStatusCommand]):
    """
    Overwrite the status label of one order.

    Labels are not validated and any transition is allowed; a missing
    status leaves the order untouched. The body is the updated order, or
    null when the id matches nothing.
    """

    failure_message = messages.ORDER_STATUS_UPDATE_FAILED

    def __init__(self, orders: IOrderRepository) -> None:
        self.orders = orders

    async def handle(self, command: UpdateOrderStatusCommand) -> WorkflowResponse:
        if command.status is None:
            # nothing to write; report the order as stored
            order = await self.orders.get_by_id(command.order_id)
            return WorkflowResponse.ok(order.to_dict() if order else None)

        order = await self.orders.update_by_id(
            command.order_id,
            {"status": command.status},
            return_new=True,
        )
        logger.info(
            "Order status updated",
            order_id=str(command.order_id),
            status=command.status,
            found=order is not None,
        )
        return WorkflowResponse.ok(order.to_dict() if order else None)
