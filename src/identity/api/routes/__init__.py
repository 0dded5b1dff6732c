"""
Identity API Routes
"""
from src.identity.api.routes.auth import router as auth_router

__all__ = ["auth_router"]
