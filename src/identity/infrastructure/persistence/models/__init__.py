"""
Identity Infrastructure - ORM Models
"""
from src.identity.infrastructure.persistence.models.user_model import UserModel

__all__ = ["UserModel"]
