"""Identity Application Services"""
from src.identity.application.services.auth_service import AuthService

__all__ = ["AuthService"]
