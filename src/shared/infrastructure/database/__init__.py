"""
Shared Database Infrastructure
Declarative base, session factory, and generic repository
"""
from src.shared.infrastructure.database.base_model import Base
from src.shared.infrastructure.database.session import DatabaseSessionFactory
from src.shared.infrastructure.database.sqlalchemy_repository import SQLAlchemyRepository

__all__ = [
    "Base",
    "DatabaseSessionFactory",
    "SQLAlchemyRepository",
]
