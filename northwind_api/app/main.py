"""
Main entrypoint for the Northwind API.

This module assembles the FastAPI application.  ``create_app`` sets up
logging, builds the data context → repository → service chain
explicitly and mounts the API router under ``/api``.  The default
application is instantiated at import time as ``app`` so it can be
served directly, e.g.::

    uvicorn northwind_api.app.main:app --reload
"""

import logging
import sqlite3
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import AppDbContext, load_seed_file
from .core.logging_config import setup_logging
from .repositories.product_repository import InMemoryProductRepository
from .services.product_service import ProductService

logger = logging.getLogger(__name__)


def open_product_store(settings: Settings) -> AppDbContext:
    """Open the product store named in ``settings``.

    When ``settings.seed_file`` is set, its products are loaded into the
    store before it is returned.  The store is closed again if seeding
    fails.
    """
    context = AppDbContext(settings.database_name)
    if settings.seed_file:
        try:
            context.seed(load_seed_file(settings.seed_file))
        except Exception:
            context.close()
            raise
    return context


def create_app(
    settings: Optional[Settings] = None,
    product_service: Optional[ProductService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        module settings.
    product_service : Optional[ProductService]
        A ready-made service for the product endpoints.  When omitted
        a store is opened with ``open_product_store`` and closed again
        when the application shuts down.  A caller-supplied service
        keeps ownership of its own store.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.product_context = None
    if product_service is None:
        app.state.product_context = open_product_store(settings)
        product_service = ProductService(InMemoryProductRepository(app.state.product_context))
    app.state.product_service = product_service
    app.include_router(api_router, prefix="/api")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        # Only the store opened above belongs to this application.
        if app.state.product_context is not None:
            app.state.product_context.close()

    @app.exception_handler(sqlite3.Error)
    async def store_error_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
        logger.exception("Store error while handling %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
