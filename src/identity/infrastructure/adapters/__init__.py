"""Identity infrastructure adapters"""
from src.identity.infrastructure.adapters.jwt_service import JWTService
from src.identity.infrastructure.adapters.password_service import PasswordService

__all__ = ["JWTService", "PasswordService"]
