"""
Shared Infrastructure Layer
Database and observability
"""
from src.shared.infrastructure.database import (
    Base,
    DatabaseSessionFactory,
    SQLAlchemyRepository,
)
from src.shared.infrastructure.observability import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Base",
    "DatabaseSessionFactory",
    "SQLAlchemyRepository",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
