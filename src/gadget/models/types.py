"""Pydantic models for the Gadget JSON API."""

from pydantic import BaseModel

from gadget.models.domain import DecodeFailure, RedirectEntity


class RedirectDetail(BaseModel):
    """A decoded redirect."""

    id: str
    type: str
    alias: str
    destination: str

    @classmethod
    def from_entity(cls, entity: RedirectEntity) -> "RedirectDetail":
        return cls(
            id=entity.id,
            type=entity.type,
            alias=entity.alias,
            destination=entity.destination,
        )


class MalformedRedirect(BaseModel):
    """A stored row whose alias could not be decoded."""

    id: str
    raw_alias: str
    reason: str

    @classmethod
    def from_failure(cls, failure: DecodeFailure) -> "MalformedRedirect":
        return cls(id=failure.id, raw_alias=failure.raw_alias, reason=failure.reason)


class RedirectList(BaseModel):
    """All redirects, in stored order."""

    redirects: list[RedirectDetail]
    malformed: list[MalformedRedirect]


class NewRedirect(BaseModel):
    """Request body for creating a redirect."""

    type: str
    alias: str
    destination: str


class UpdateRedirect(BaseModel):
    """Request body for changing a redirect's destination."""

    destination: str


class DeleteStatus(BaseModel):
    """Outcome of a delete; false means the id was unknown."""

    deleted: bool
