"""
Identity Application Layer
Commands and services
"""
from src.identity.application.services.auth_service import AuthService

__all__ = ["AuthService"]
