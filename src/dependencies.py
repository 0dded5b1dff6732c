# src/dependencies.py
from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog.infrastructure.persistence.repositories.category_repository import (
    CategoryRepository,
)
from src.catalog.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)
from src.config import Settings
from src.identity.infrastructure.adapters.jwt_service import JWTService
from src.identity.infrastructure.adapters.password_service import PasswordService
from src.identity.infrastructure.persistence.repositories.user_repository import UserRepository
from src.orders.infrastructure.persistence.repositories.order_repository import OrderRepository
from src.shared.infrastructure.database.session import DatabaseSessionFactory


# --- Process-wide singletons (created in the app lifespan) ---
def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_password_service(request: Request) -> PasswordService:
    return request.app.state.password_service


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


# --- DB session: one per request ---
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    db: DatabaseSessionFactory = request.app.state.db
    async with db.session() as session:
        yield session


# --- Repository constructors ---
def get_user_repo(session: AsyncSession = Depends(get_db_session)) -> UserRepository:
    return UserRepository(session)


def get_order_repo(session: AsyncSession = Depends(get_db_session)) -> OrderRepository:
    return OrderRepository(session)


def get_category_repo(session: AsyncSession = Depends(get_db_session)) -> CategoryRepository:
    return CategoryRepository(session)


def get_product_repo(session: AsyncSession = Depends(get_db_session)) -> ProductRepository:
    return ProductRepository(session)


# --- Token extraction ---
def extract_token(request: Request) -> Optional[str]:
    """
    Session token from the Authorization header.

    Both "Bearer <token>" and the bare token are accepted.
    """
    auth = request.headers.get("Authorization", "").strip()
    if not auth:
        return None
    if auth.lower().startswith("bearer "):
        return auth.split(" ", 1)[1].strip() or None
    return auth
