"""Redirect resolution.

Every GET path not claimed by another route is looked up in the store
and answered with a 307. Paths under /_gadget are reserved and 404.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, RedirectResponse, Response

from gadget.api.deps import get_settings, get_store
from gadget.config import Settings
from gadget.core.resolver import Resolver
from gadget.store.base import RedirectStore

logger = logging.getLogger(__name__)

router = APIRouter()

RESERVED_PREFIX = "_gadget"


@router.api_route(
    "/_gadget/{endpoint:path}",
    methods=["GET", "POST", "PUT", "DELETE"],
    include_in_schema=False,
)
def gadget_not_found(endpoint: str) -> JSONResponse:
    """Unknown endpoint under the reserved prefix."""
    return JSONResponse(
        status_code=404,
        content={"detail": "API endpoint not found", "endpoint": endpoint},
    )


@router.get("/{path:path}", include_in_schema=False)
def find_redirect(
    path: str,
    store: RedirectStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Resolve path against the stored redirects."""
    if path.split("/", 1)[0] == RESERVED_PREFIX:
        return gadget_not_found(path)

    resolver = Resolver.compile(store.load(), settings.ui_location)
    destination = resolver.find_redirect(path)
    logger.info(f"Resolved `{path}` => {destination}")
    return RedirectResponse(url=destination, status_code=307)
