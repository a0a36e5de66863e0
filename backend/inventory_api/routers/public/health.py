"""
Health check endpoints for the REST API.
Provides basic and detailed health status of the service and its dependencies.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from inventory_api.routers._common import get_app_settings, get_storage
from shared.config.settings import Settings
from shared.infrastructure.db import Database
from shared.infrastructure.storage import Storage
from shared.utils.exceptions import UpstreamError


router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health_check(settings: Settings = Depends(get_app_settings)):
    """
    Basic health check endpoint.
    Returns service status without checking dependencies.
    """
    return {
        "status": "healthy",
        "service": "inventory-api",
        "environment": settings.environment,
    }


@router.get("/health/detailed")
def detailed_health_check(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    storage: Storage = Depends(get_storage),
):
    """
    Detailed health check that verifies connectivity to dependencies.

    Returns 503 Service Unavailable if any dependency is down.
    """
    database: Database = request.app.state.database
    dependencies: dict[str, dict] = {}

    try:
        database.ping()
        dependencies["database"] = {"status": "healthy"}
    except SQLAlchemyError as e:
        dependencies["database"] = {"status": "unhealthy", "error": str(e)}

    try:
        storage.ensure_bucket()
        dependencies["storage"] = {"status": "healthy", "bucket": storage.bucket}
    except UpstreamError as e:
        dependencies["storage"] = {"status": "unhealthy", "error": e.message}

    all_healthy = all(d["status"] == "healthy" for d in dependencies.values())
    checks = {
        "service": "inventory-api",
        "environment": settings.environment,
        "status": "healthy" if all_healthy else "degraded",
        "dependencies": dependencies,
    }

    if not all_healthy:
        return JSONResponse(content=checks, status_code=503)
    return checks
