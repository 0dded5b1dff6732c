"""
Update Profile Command
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import status

from src.identity.domain import messages
from src.identity.domain.exception import UserNotFoundException
from src.identity.domain.protocols.user_repository_protocol import IUserRepository
from src.shared.application.base_command import BaseCommand, is_blank
from src.shared.application.command_handler import CommandHandler
from src.shared.application.response import WorkflowResponse
from src.shared.exceptions import ValidationError
from src.shared.infrastructure.observability.logger import get_logger
from src.shared.security.passwords.ports import PasswordHasherPort

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpdateProfileCommand(BaseCommand):
    """
    Command to edit the caller's own profile.

    `issued_by` is the caller. `email` is accepted but never written.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class UpdateProfileCommandHandler(CommandHandler[UpdateProfileCommand]):
    """
    Handler for UpdateProfileCommand.

    Each of name / password / phone / address takes the supplied value when
    it is non-empty, otherwise keeps the stored one.
    """

    failure_status = status.HTTP_400_BAD_REQUEST
    failure_message = messages.PROFILE_UPDATE_FAILED

    def __init__(
        self,
        users: IUserRepository,
        passwords: PasswordHasherPort,
        min_password_length: int = 6,
    ) -> None:
        self.users = users
        self.passwords = passwords
        self.min_password_length = min_password_length

    async def handle(self, command: UpdateProfileCommand) -> WorkflowResponse:
        if not is_blank(command.password) and len(command.password) < self.min_password_length:
            message = messages.PROFILE_PASSWORD_TOO_SHORT
            raise ValidationError(
                message,
                status_code=status.HTTP_200_OK,
                body={"success": False, "error": message, "message": message},
            )

        user = await self.users.get_by_id(command.issued_by)
        if user is None:
            raise UserNotFoundException(command.issued_by)

        hashed = None
        if not is_blank(command.password):
            hashed = self.passwords.hash_password(command.password)

        merged = {
            "name": _pick(command.name, user.name),
            "password": _pick(hashed, user.password),
            "phone": _pick(command.phone, user.phone),
            "address": _pick(command.address, user.address),
        }
        updated = await self.users.update_by_id(user.id, merged, return_new=True)
        if updated is None:
            raise UserNotFoundException(user.id)

        logger.info(
            "Profile updated",
            user_id=str(user.id),
            password_changed=hashed is not None,
        )
        return WorkflowResponse.ok(
            {
                "success": True,
                "message": messages.PROFILE_UPDATED,
                "updatedUser": updated.to_public(),
            }
        )


def _pick(supplied: Optional[str], stored: str) -> str:
    return stored if is_blank(supplied) else supplied
