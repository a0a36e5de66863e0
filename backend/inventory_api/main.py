"""
REST API main application.
Entry point for the FastAPI REST server.

The database and object storage are built here, stored on ``app.state`` and
released by the lifespan handler. Nothing connects at import time.
"""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from inventory_api.core import configure_cors, lifespan, register_middlewares
from inventory_api.core.errors import register_exception_handlers
from inventory_api.routers import (
    auth_router,
    health_router,
    ingredients_router,
    lookups_router,
    products_router,
)
from shared.config.settings import Settings, get_settings
from shared.infrastructure.db import Database
from shared.infrastructure.storage import LocalStorage, Storage, create_storage


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
    storage: Storage | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration (defaults to environment settings)
        database: Database to use (defaults to one built from settings.database_url)
        storage: Object storage (defaults to the backend selected by settings)
    """
    settings = settings or get_settings()
    database = database or Database(settings.database_url, echo=settings.database_echo)
    storage = storage or create_storage(settings)

    app = FastAPI(
        title="Wine Inventory API",
        description="Wine products and ingredients inventory",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.storage = storage

    register_exception_handlers(app)
    register_middlewares(app, settings)
    configure_cors(app, settings)

    # =========================================================================
    # Include Routers
    # =========================================================================

    app.include_router(health_router)
    app.include_router(lookups_router)
    app.include_router(auth_router)
    app.include_router(products_router)
    app.include_router(ingredients_router)

    # Locally stored images are served from the storage root.
    # The directory is created by ensure_bucket() at startup.
    if isinstance(storage, LocalStorage) and storage.public_base_url.startswith("/"):
        app.mount(
            storage.public_base_url,
            StaticFiles(directory=str(storage.base_path), check_dir=False),
            name="uploads",
        )

    return app


app = create_app()


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "inventory_api.main:app",
        host="0.0.0.0",
        port=get_settings().rest_api_port,
        reload=True,
    )
