"""
Authentication Service
Entry points for the account workflows
"""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from src.identity.application.commands.forgot_password_command import (
    ForgotPasswordCommand,
    ForgotPasswordCommandHandler,
)
from src.identity.application.commands.login_command import (
    LoginCommand,
    LoginCommandHandler,
)
from src.identity.application.commands.register_user_command import (
    RegisterUserCommand,
    RegisterUserCommandHandler,
)
from src.identity.application.commands.update_profile_command import (
    UpdateProfileCommand,
    UpdateProfileCommandHandler,
)
from src.identity.domain.protocols.user_repository_protocol import IUserRepository
from src.shared.application.response import WorkflowResponse
from src.shared.security.passwords.ports import PasswordHasherPort
from src.shared.security.tokens.ports import TokenIssuerPort


class AuthService:
    """
    Orchestrates registration, login, recovery and profile edits.

    Each method builds its command and runs it through the matching
    handler, so callers always get a WorkflowResponse back.
    """

    def __init__(
        self,
        users: IUserRepository,
        passwords: PasswordHasherPort,
        tokens: TokenIssuerPort,
        profile_password_min_length: int = 6,
    ) -> None:
        self._register = RegisterUserCommandHandler(users, passwords)
        self._login = LoginCommandHandler(users, passwords, tokens)
        self._forgot_password = ForgotPasswordCommandHandler(users, passwords)
        self._update_profile = UpdateProfileCommandHandler(
            users, passwords, min_password_length=profile_password_min_length
        )

    async def register(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        answer: Optional[str] = None,
    ) -> WorkflowResponse:
        return await self._register(
            RegisterUserCommand(
                name=name,
                email=email,
                password=password,
                phone=phone,
                address=address,
                answer=answer,
            )
        )

    async def login(
        self,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> WorkflowResponse:
        return await self._login(LoginCommand(email=email, password=password))

    async def forgot_password(
        self,
        email: Optional[str] = None,
        answer: Optional[str] = None,
        new_password: Optional[str] = None,
    ) -> WorkflowResponse:
        return await self._forgot_password(
            ForgotPasswordCommand(email=email, answer=answer, new_password=new_password)
        )

    async def update_profile(
        self,
        caller_id: UUID,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> WorkflowResponse:
        return await self._update_profile(
            UpdateProfileCommand(
                name=name,
                email=email,
                password=password,
                phone=phone,
                address=address,
                issued_by=caller_id,
            )
        )
