"""
Identity Infrastructure Layer
ORM models, repositories, external adapters
"""
from src.identity.infrastructure.adapters import JWTService, PasswordService
from src.identity.infrastructure.persistence.models import UserModel
from src.identity.infrastructure.persistence.repositories import UserRepository

__all__ = [
    "JWTService",
    "PasswordService",
    "UserModel",
    "UserRepository",
]
