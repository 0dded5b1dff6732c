"""
Login Command
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
from src.shared.exceptions import ValidationError
from src.shared.infrastructure.observability.logger import get_logger
from src.shared.security.passwords.ports import PasswordHasherPort
from src.shared.security.tokens.ports import TokenIssuerPort

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoginCommand(BaseCommand):
    """
    Command to authenticate a user.

    Attributes:
        email: User email address
        password: Plain text password
    """
    email: Optional[str] = None
    password: Optional[str] = None


class LoginCommandHandler(CommandHandler[LoginCommand]):
    """
    Handler for LoginCommand.

    Verifies the password and issues a session token. Unknown email and
    wrong password are reported differently (404 vs 200).
    """

    failure_message = messages.LOGIN_FAILED

    def __init__(
        self,
        users: IUserRepository,
        passwords: PasswordHasherPort,
        tokens: TokenIssuerPort,
    ) -> None:
        self.users = users
        self.passwords = passwords
        self.tokens = tokens

    async def handle(self, command: LoginCommand) -> WorkflowResponse:
        if is_blank(command.email) or is_blank(command.password):
            raise ValidationError(
                messages.INVALID_EMAIL_OR_PASSWORD,
                status_code=status.HTTP_404_NOT_FOUND,
            )

        user = await self.users.get_by_email(command.email)
        if user is None:
            logger.info("Login for unknown email")
            return WorkflowResponse.failure(
                status.HTTP_404_NOT_FOUND, messages.EMAIL_NOT_REGISTERED
            )

        if not self.passwords.compare_password(command.password, user.password):
            logger.info("Login with wrong password", user_id=str(user.id))
            return WorkflowResponse.failure(status.HTTP_200_OK, messages.INVALID_PASSWORD)

        token = self.tokens.issue(user.id)

        logger.info("User logged in", user_id=str(user.id))
        return WorkflowResponse.ok(
            {
                "success": True,
                "message": messages.LOGGED_IN,
                "user": user.to_public(),
                "token": token,
            }
        )
