"""Redirects JSON API.

GET    /_gadget/api/redirect       - List redirects
POST   /_gadget/api/redirect       - Create redirect
GET    /_gadget/api/redirect/{id}  - Get redirect
PUT    /_gadget/api/redirect/{id}  - Change destination
DELETE /_gadget/api/redirect/{id}  - Delete redirect
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from gadget.api.deps import get_redirect_service
from gadget.errors import MalformedRedirectError, RedirectNotFoundError
from gadget.models.types import (
    DeleteStatus,
    MalformedRedirect,
    NewRedirect,
    RedirectDetail,
    RedirectList,
    UpdateRedirect,
)
from gadget.service.redirects import RedirectService

router = APIRouter()


@router.get("/redirect", response_model=RedirectList)
def list_redirects(
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectList:
    """List all redirects in stored order.

    Rows with undecodable aliases are reported under "malformed".
    """
    listing = service.list()
    return RedirectList(
        redirects=[RedirectDetail.from_entity(r) for r in listing.redirects],
        malformed=[MalformedRedirect.from_failure(f) for f in listing.malformed],
    )


@router.post("/redirect", response_model=RedirectDetail, status_code=201)
def create_redirect(
    redirect: NewRedirect,
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectDetail:
    """Create a redirect with a generated id."""
    entity = service.create(redirect.type, redirect.alias, redirect.destination)
    return RedirectDetail.from_entity(entity)


@router.get("/redirect/{redirect_id}", response_model=RedirectDetail)
def get_redirect(
    redirect_id: str,
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectDetail:
    """Get a redirect by id.

    Raises:
        HTTPException: 404 if not found, 422 if the stored alias is malformed.
    """
    try:
        entity = service.get(redirect_id)
    except RedirectNotFoundError as e:
        raise HTTPException(status_code=404, detail="Redirect not found") from e
    except MalformedRedirectError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return RedirectDetail.from_entity(entity)


@router.put("/redirect/{redirect_id}", response_model=RedirectDetail)
def update_redirect(
    redirect_id: str,
    update: UpdateRedirect,
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectDetail:
    """Change the destination of a redirect.

    Raises:
        HTTPException: 404 if not found, 422 if the stored alias is malformed.
    """
    try:
        entity = service.update(redirect_id, update.destination)
    except RedirectNotFoundError as e:
        raise HTTPException(status_code=404, detail="Redirect not found") from e
    except MalformedRedirectError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return RedirectDetail.from_entity(entity)


@router.delete("/redirect/{redirect_id}", response_model=DeleteStatus)
def delete_redirect(
    redirect_id: str,
    service: RedirectService = Depends(get_redirect_service),
) -> DeleteStatus:
    """Delete a redirect. Unknown ids succeed with deleted=false."""
    return DeleteStatus(deleted=service.delete(redirect_id))
