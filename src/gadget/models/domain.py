"""Domain models for Gadget.

Pure Python dataclasses for the stored document and the decoded redirect
records. Stores deal in RawRedirect/RedirectDocument; the service and the
HTTP layer deal in RedirectEntity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ============================================================================
# Stored Document
# ============================================================================


@dataclass
class RawRedirect:
    """A redirect exactly as stored: encoded alias, destination, id."""

    alias: str
    destination: str
    id: str

    def to_dict(self) -> dict[str, str]:
        """Mapping in on-disk key order."""
        return {"alias": self.alias, "destination": self.destination, "id": self.id}


@dataclass
class RedirectDocument:
    """The whole store: ordered redirects plus any other top-level keys."""

    redirects: list[RawRedirect] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def index_of(self, redirect_id: str) -> int | None:
        """Index of the first redirect whose id equals redirect_id."""
        for index, raw in enumerate(self.redirects):
            if raw.id == str(redirect_id):
                return index
        return None

    @property
    def missing_redirect_destination(self) -> str | None:
        value = self.extra.get("missing_redirect_destination")
        return str(value) if value else None


# ============================================================================
# Decoded Records
# ============================================================================


@dataclass
class RedirectEntity:
    """Domain model for a decoded redirect."""

    id: str
    type: str
    alias: str
    destination: str


@dataclass
class DecodeFailure:
    """A stored row whose alias could not be decoded."""

    id: str
    raw_alias: str
    reason: str


@dataclass
class DecodeResult:
    """Outcome of decoding one stored row: exactly one field is set."""

    entity: RedirectEntity | None = None
    failure: DecodeFailure | None = None


@dataclass
class RedirectListing:
    """Result of listing the store."""

    redirects: list[RedirectEntity] = field(default_factory=list)
    malformed: list[DecodeFailure] = field(default_factory=list)
