from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from src.catalog.api.routes import category_router, product_router
from src.config import Settings, get_settings
from src.identity.api.routes import auth_router
from src.identity.infrastructure.adapters.jwt_service import JWTService
from src.identity.infrastructure.adapters.password_service import PasswordService
from src.orders.api.routes import orders_router
from src.shared.exceptions import register_exception_handlers  # central mapping
from src.shared.health import router as health_router
from src.shared.http.middleware import RequestContextMiddleware
from src.shared.infrastructure.database.session import DatabaseSessionFactory
from src.shared.infrastructure.observability.logger import configure_logging, get_logger

# ORM models must be imported before create_all()
import src.orders.infrastructure.persistence.models  # noqa: F401

logger = get_logger(__name__)


def _lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = DatabaseSessionFactory(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )
        if settings.DB_AUTO_CREATE:
            await db.create_all()

        app.state.settings = settings
        app.state.db = db
        app.state.password_service = PasswordService()
        app.state.jwt_service = JWTService(
            settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expires_in=settings.JWT_EXPIRES_IN,
        )
        logger.info("Application started", env=settings.ENVIRONMENT)
        try:
            yield
        finally:
            await db.dispose()
            logger.info("Application stopped")

    return lifespan


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    app = FastAPI(
        title=f"{settings.PROJECT_NAME} API",
        version=settings.PROJECT_VERSION,
        swagger_ui_parameters={"persistAuthorization": True},
        lifespan=_lifespan(settings),
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    # request_id → structlog context + X-Request-ID
    app.add_middleware(RequestContextMiddleware)

    # Routers
    app.include_router(auth_router, prefix=settings.API_V1_STR)
    app.include_router(orders_router, prefix=settings.API_V1_STR)
    app.include_router(category_router, prefix=settings.API_V1_STR)
    app.include_router(product_router, prefix=settings.API_V1_STR)
    app.include_router(health_router)

    # Centralized error handling → {code, message, details?, correlation_id?}
    register_exception_handlers(app)

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {
            "message": f"{settings.PROJECT_NAME} API",
            "docs": "/docs",
            "health": "/_health/db",
        }

    # ---- Custom OpenAPI to add Bearer auth ----
    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            routes=app.routes,
        )
        schema.setdefault("components", {}).setdefault("securitySchemes", {})["bearerAuth"] = {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
        schema["security"] = [{"bearerAuth": []}]
        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi

    return app


app = create_app()
