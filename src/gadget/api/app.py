"""FastAPI application factory.

Route groups are registered in this order, so fixed paths always win
over the redirect catch-all:

1. /health and the server-rendered admin pages
2. JSON API under /_gadget/api
3. SPA shell under /_gadget/ui/
4. redirect resolution for every other GET path
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gadget.api.routes import pages, redirects, resolve, ui
from gadget.config import API_BASE_PATH, UI_BASE_PATH, Settings
from gadget.errors import StoreError
from gadget.store.base import RedirectStore
from gadget.store.factory import open_store

logger = logging.getLogger(__name__)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Turn store failures into a generic 500."""
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Redirect store unavailable"})


def create_app(
    settings: Settings | None = None,
    store: RedirectStore | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings. Defaults to Settings.from_env().
        store: Optional store. Defaults to the store named by settings.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings.from_env()
    if store is None:
        store = open_store(settings)

    app = FastAPI(
        title="Gadget",
        description="Redirect administration",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.store = store

    # Add CORS middleware for the SPA dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StoreError, store_error_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    # Include routes
    app.include_router(pages.router)
    app.include_router(redirects.router, prefix=API_BASE_PATH)
    ui.mount_assets(app, settings.ui_dist)
    app.include_router(ui.router, prefix=UI_BASE_PATH.rstrip("/"))
    app.include_router(resolve.router)

    logger.info(f"Gadget app created with store {store!r}")
    return app
