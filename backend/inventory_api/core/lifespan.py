"""
Application lifespan handler.
Manages startup and shutdown of the database and object storage.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from shared.config.logging import setup_logging, api_logger as logger
from shared.config.settings import Settings
from shared.infrastructure.db import Database
from shared.infrastructure.storage import Storage
from shared.utils.exceptions import UpstreamError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Runs on startup and shutdown.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database
    storage: Storage = app.state.storage

    setup_logging(settings)

    # Validate production settings before startup
    config_errors = settings.validate_production_settings()
    if config_errors:
        for error in config_errors:
            logger.error("Configuration error", error=error)
        if settings.environment == "production":
            raise RuntimeError(
                f"Production configuration errors: {'; '.join(config_errors)}. "
                "Server will not start with insecure configuration."
            )
        logger.warning("Running with insecure defaults (acceptable for development only)")

    logger.info("Starting inventory API", port=settings.rest_api_port, env=settings.environment)

    database.create_all()

    # Bucket initialization failure is non-fatal; uploads will surface the error
    try:
        storage.ensure_bucket()
        logger.info("Storage bucket ready", bucket=storage.bucket)
    except UpstreamError as e:
        logger.warning("Storage bucket initialization failed (non-fatal)", error=e.message)

    yield

    # Shutdown
    logger.info("Shutting down inventory API")
    storage.close()
    database.dispose()
