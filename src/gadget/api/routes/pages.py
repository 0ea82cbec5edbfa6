"""Server-rendered admin pages.

GET  /            - List redirects
GET  /new         - New redirect form
POST /new         - Create redirect, back to /
GET  /delete/{id} - Delete redirect, back to /

Delete stays a GET for compatibility with existing links. It is still a
command: the response is marked no-store and kept out of the schema.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from gadget.api.deps import get_redirect_service, templates
from gadget.service.redirects import RedirectService

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    service: RedirectService = Depends(get_redirect_service),
) -> HTMLResponse:
    """Render the redirect list."""
    listing = service.list()
    return templates.TemplateResponse(
        request,
        "home.html",
        {"redirects": listing.redirects, "malformed": listing.malformed},
    )


@router.get("/new", response_class=HTMLResponse)
def new_form(request: Request) -> HTMLResponse:
    """Render the empty create form."""
    return templates.TemplateResponse(request, "new.html", {})


@router.post("/new")
def create_redirect(
    redirectType: str = Form(""),  # noqa: N803 - form field name
    alias: str = Form(""),
    destination: str = Form(""),
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectResponse:
    """Create a redirect from the form and go back to the list."""
    service.create(redirectType, alias, destination)
    return RedirectResponse(url="/", status_code=302)


@router.get("/delete/{redirect_id}", include_in_schema=False)
def delete_redirect(
    redirect_id: str,
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectResponse:
    """Delete a redirect and go back to the list."""
    service.delete(redirect_id)
    return RedirectResponse(
        url="/",
        status_code=302,
        headers={"Cache-Control": "no-store"},
    )
