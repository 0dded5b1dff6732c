"""Identity API Dependencies"""
from src.identity.api.dependencies.auth import (
    CurrentUser,
    get_auth_service,
    require_admin,
    require_sign_in,
)

__all__ = [
    "CurrentUser",
    "get_auth_service",
    "require_admin",
    "require_sign_in",
]
