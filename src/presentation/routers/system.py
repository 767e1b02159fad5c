"""System router for non-versioned application endpoints.

Root banner and health check. Both are side-effect free and need no
authentication.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database
from src.infrastructure.persistence.database import Database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Service banner with name, status and version."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health(database: Database = Depends(get_database)) -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        200 with ``database: "ok"`` when a trivial query succeeds,
        503 with ``database: "unavailable"`` otherwise.
    """
    if await database.check_connection():
        return JSONResponse(content={"status": "healthy", "database": "ok"})

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "database": "unavailable"},
    )
