"""SPA shell under /_gadget/ui/.

The Vue app owns routing; the server only hands out index.html for the
paths the client router knows. Built assets are served from
GADGET_UI_DIST when it is set, otherwise a minimal shell is rendered.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles

from gadget.api.deps import get_settings, templates
from gadget.config import API_BASE_PATH, UI_BASE_PATH, Settings

logger = logging.getLogger(__name__)

router = APIRouter()

# Client route table: path pattern -> view name
CLIENT_ROUTES: dict[str, str] = {
    "/": "home",
    "/redirect": "create-redirect",
    "/redirect/edit/:id": "redirect",
    "/redirect/delete/:id": "delete-redirect",
}


def _compile_route(pattern: str) -> re.Pattern[str]:
    regex = re.sub(r":(\w+)", r"(?P<\1>[^/]+)", pattern.rstrip("/"))
    return re.compile(f"^{regex}/?$")


_COMPILED_ROUTES = [(_compile_route(p), name) for p, name in CLIENT_ROUTES.items()]


def match_client_route(path: str) -> str | None:
    """Name of the client view for path (relative to the UI base), if any."""
    path = "/" + path.strip("/")
    for regex, name in _COMPILED_ROUTES:
        if regex.match(path):
            return name
    return None


def mount_assets(app: FastAPI, ui_dist: Path | None) -> None:
    """Mount built SPA assets when a dist directory is configured."""
    if ui_dist is None:
        return
    assets_dir = Path(ui_dist) / "assets"
    if assets_dir.is_dir():
        app.mount(
            f"{UI_BASE_PATH}assets",
            StaticFiles(directory=str(assets_dir)),
            name="ui-assets",
        )
    else:
        logger.warning(f"GADGET_UI_DIST has no assets directory: {ui_dist}")


@router.get("", include_in_schema=False)
def ui_base(request: Request) -> RedirectResponse:
    """Send the bare base path to the shell, keeping the query string."""
    url = UI_BASE_PATH
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return RedirectResponse(url=url, status_code=307)


@router.get("/{client_path:path}", response_class=HTMLResponse)
def spa_shell(
    client_path: str,
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Response:
    """Serve the SPA entry point for known client routes.

    Raises:
        HTTPException: 404 for paths the client router does not know.
    """
    view = match_client_route(client_path)
    if view is None:
        raise HTTPException(status_code=404, detail="UI route not found")

    if settings.ui_dist is not None:
        index = Path(settings.ui_dist) / "index.html"
        if index.is_file():
            return FileResponse(index, media_type="text/html")

    return templates.TemplateResponse(
        request,
        "spa.html",
        {"view": view, "base_path": UI_BASE_PATH, "api_path": API_BASE_PATH},
    )
