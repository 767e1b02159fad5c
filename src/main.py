"""
Main FastAPI application entry point.

Wires the identity service: lifespan (schema bootstrap for local SQLite),
trace middleware, envelope exception handlers, the /api/auth routers and
the system endpoints.

Run locally:
    uvicorn src.main:app --reload --port 3000
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup:
        - Create tables when running on SQLite outside production
          (PostgreSQL schemas are managed by Alembic)
    Shutdown:
        - Dispose the connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = get_database()

    if database.is_sqlite and not settings.is_production:
        await database.create_all()
        logger.info("database_schema_created", backend="sqlite")

    logger.info(
        "application_started",
        app_name=settings.app_name,
        environment=settings.environment.value,
    )

    yield

    await database.close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Account registration, login, password reset and profile management",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (envelope error responses)
register_exception_handlers(app)

app.include_router(v1_router)
app.include_router(system_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host=settings.host, port=settings.port)
