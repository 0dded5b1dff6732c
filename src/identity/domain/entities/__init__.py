"""Identity Domain Entities"""
from src.identity.domain.entities.user import User

__all__ = ["User"]
