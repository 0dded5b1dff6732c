"""
Orders Application Commands
"""
from src.orders.application.commands.update_order_status_command import (
    UpdateOrderStatusCommand,
    UpdateOrderStatusCommandHandler,
)

__all__ = ["UpdateOrderStatusCommand", "UpdateOrderStatusCommandHandler"]
