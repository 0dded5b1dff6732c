"""
Register User Command
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import status

from src.identity.domain import messages
from src.identity.domain.entities.user import User
from src.identity.domain.protocols.user_repository_protocol import IUserRepository
from src.shared.application.base_command import BaseCommand, is_blank
from src.shared.application.command_handler import CommandHandler
from src.shared.application.response import WorkflowResponse
from src.shared.exceptions import MissingFieldError
from src.shared.infrastructure.observability.logger import get_logger
from src.shared.security.passwords.ports import PasswordHasherPort

logger = get_logger(__name__)


@dataclass(frozen=True)
class RegisterUserCommand(BaseCommand):
    """
    Command to open a buyer account.

    Every field is optional at this level; the handler reports the first
    missing one.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    answer: Optional[str] = None


# Checked in this order; only the first missing field is reported.
REQUIRED_FIELDS = (
    ("name", messages.NAME_REQUIRED),
    ("email", messages.EMAIL_REQUIRED),
    ("password", messages.PASSWORD_REQUIRED),
    ("phone", messages.PHONE_REQUIRED),
    ("address", messages.ADDRESS_REQUIRED),
    ("answer", messages.ANSWER_REQUIRED),
)


class RegisterUserCommandHandler(CommandHandler[RegisterUserCommand]):
    """
    Handler for RegisterUserCommand.

    Creates a role-0 account unless the email is already registered.
    """

    failure_message = messages.REGISTER_FAILED

    def __init__(self, users: IUserRepository, passwords: PasswordHasherPort) -> None:
        self.users = users
        self.passwords = passwords

    async def handle(self, command: RegisterUserCommand) -> WorkflowResponse:
        self._require_fields(command)

        existing = await self.users.get_by_email(command.email)
        if existing is not None:
            return WorkflowResponse.failure(status.HTTP_200_OK, messages.ALREADY_REGISTERED)

        user = await self.users.create(
            {
                "name": command.name,
                "email": command.email,
                "password": self.passwords.hash_password(command.password),
                "phone": command.phone,
                "address": command.address,
                "answer": command.answer,
                "role": User.BUYER,
            }
        )

        logger.info("User registered", user_id=str(user.id))
        return WorkflowResponse.created(
            {"success": True, "message": messages.REGISTERED, "user": user.to_public()}
        )

    @staticmethod
    def _require_fields(command: RegisterUserCommand) -> None:
        for field_name, message in REQUIRED_FIELDS:
            if is_blank(getattr(command, field_name)):
                body = {"success": False, "message": message}
                if field_name == "name":
                    # older clients read this one under "error"
                    body["error"] = message
                raise MissingFieldError(
                    field_name, message, status_code=status.HTTP_200_OK, body=body
                )
