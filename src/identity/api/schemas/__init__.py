"""
Identity API Schemas
Pydantic v2 models for request validation
"""
from src.identity.api.schemas.auth_schemas import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
)

__all__ = [
    "ForgotPasswordRequest",
    "LoginRequest",
    "RegisterRequest",
    "UpdateProfileRequest",
]
