"""
Authentication Dependencies
"""
from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Request
from pydantic import BaseModel

from src.config import Settings
from src.dependencies import (
    extract_token,
    get_app_settings,
    get_jwt_service,
    get_password_service,
    get_user_repo,
)
from src.identity.application.services.auth_service import AuthService
from src.identity.domain import messages
from src.identity.domain.protocols.user_repository_protocol import IUserRepository
from src.shared.exceptions import UnauthorizedError
from src.shared.infrastructure.observability.logger import bind_context, get_logger
from src.shared.security.passwords.ports import PasswordHasherPort
from src.shared.security.tokens.ports import TokenIssuerPort

logger = get_logger(__name__)


class CurrentUser(BaseModel):
    """
    Caller identity resolved from the session token.

    Only the id is carried in the token; role checks load the record.
    """
    user_id: UUID


async def require_sign_in(
    request: Request,
    jwt_service: Annotated[TokenIssuerPort, Depends(get_jwt_service)],
) -> CurrentUser:
    """
    Verify the session token and resolve the caller.

    Raises:
        UnauthorizedError: token missing, expired or invalid (401)
    """
    token = extract_token(request)
    if token is None:
        raise UnauthorizedError("Token is missing.", code="token_missing")

    payload = jwt_service.decode(token)
    try:
        user_id = UUID(str(payload["_id"]))
    except ValueError:
        raise UnauthorizedError("Invalid token.", code="invalid_token")

    bind_context(user_id=str(user_id))
    return CurrentUser(user_id=user_id)


async def require_admin(
    current_user: Annotated[CurrentUser, Depends(require_sign_in)],
    users: Annotated[IUserRepository, Depends(get_user_repo)],
) -> CurrentUser:
    """
    Allow only privileged accounts (role != 0).

    Raises:
        UnauthorizedError: "UnAuthorized Access" (401)
    """
    user = await users.get_by_id(current_user.user_id)
    if user is None or not user.is_admin:
        logger.info("Admin route refused", user_id=str(current_user.user_id))
        raise UnauthorizedError(messages.UNAUTHORIZED_ACCESS)
    return current_user


def get_auth_service(
    users: Annotated[IUserRepository, Depends(get_user_repo)],
    passwords: Annotated[PasswordHasherPort, Depends(get_password_service)],
    tokens: Annotated[TokenIssuerPort, Depends(get_jwt_service)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthService:
    return AuthService(
        users,
        passwords,
        tokens,
        profile_password_min_length=settings.PROFILE_PASSWORD_MIN_LENGTH,
    )
