"""Request dependencies shared by the route modules.

The store and settings live on app.state, set by create_app(), so tests
can build an app over any store without dependency overrides.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates

from gadget.config import Settings
from gadget.service.redirects import RedirectService
from gadget.store.base import RedirectStore

TEMPLATES_DIR = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_settings(request: Request) -> Settings:
    """Dependency to get application settings."""
    return request.app.state.settings


def get_store(request: Request) -> RedirectStore:
    """Dependency to get the redirect store."""
    return request.app.state.store


def get_redirect_service(store: RedirectStore = Depends(get_store)) -> RedirectService:
    """Dependency to get a redirect service bound to the app's store."""
    return RedirectService(store)
