"""
Forgot Password Command
Resets a password after the security answer is confirmed
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import status

from src.identity.domain import messages
from src.identity.domain.protocols.user_repository_protocol import IUserRepository
from src.shared.application.base_command import BaseCommand, is_blank
from src.shared.application.command_handler import CommandHandler
from src.shared.application.response import WorkflowResponse
from src.shared.exceptions import MissingFieldError
from src.shared.infrastructure.observability.logger import get_logger
from src.shared.security.passwords.ports import PasswordHasherPort

logger = get_logger(__name__)


@dataclass(frozen=True)
class ForgotPasswordCommand(BaseCommand):
    email: Optional[str] = None
    answer: Optional[str] = None
    new_password: Optional[str] = None


class ForgotPasswordCommandHandler(CommandHandler[ForgotPasswordCommand]):
    """
    Handler for ForgotPasswordCommand.

    A wrong email and a wrong answer produce the same response.
    """

    failure_message = messages.RECOVERY_FAILED

    def __init__(self, users: IUserRepository, passwords: PasswordHasherPort) -> None:
        self.users = users
        self.passwords = passwords

    async def handle(self, command: ForgotPasswordCommand) -> WorkflowResponse:
        for field_name, message in (
            ("email", messages.RECOVERY_EMAIL_REQUIRED),
            ("answer", messages.RECOVERY_ANSWER_REQUIRED),
            ("new_password", messages.RECOVERY_NEW_PASSWORD_REQUIRED),
        ):
            if is_blank(getattr(command, field_name)):
                raise MissingFieldError(
                    field_name, message, status_code=status.HTTP_400_BAD_REQUEST
                )

        user = await self.users.get_by_email_and_answer(command.email, command.answer)
        if user is None:
            return WorkflowResponse.failure(
                status.HTTP_404_NOT_FOUND, messages.WRONG_EMAIL_OR_ANSWER
            )

        hashed = self.passwords.hash_password(command.new_password)
        await self.users.update_by_id(user.id, {"password": hashed})

        logger.info("Password reset", user_id=str(user.id))
        return WorkflowResponse.ok({"success": True, "message": messages.PASSWORD_RESET})
