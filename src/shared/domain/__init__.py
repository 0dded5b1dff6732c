"""
Shared Domain Layer
Pure domain contracts with no framework dependencies
"""
from src.shared.domain.base_entity import BaseEntity, utcnow

__all__ = [
    "BaseEntity",
    "utcnow",
]
