"""Base store interface.

A store has a narrow interface: load the whole document, save the whole
document. No partial reads or writes and no locking; concurrent writers
race and the last save wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gadget.errors import StoreReadError
from gadget.models.domain import RawRedirect, RedirectDocument


class RedirectStore(ABC):
    """Abstract base class for redirect document stores."""

    @abstractmethod
    def load(self) -> RedirectDocument:
        """Load the full document.

        Returns:
            RedirectDocument with redirects in stored order.

        Raises:
            StoreReadError: If the backing medium cannot be read or parsed.
        """
        pass

    @abstractmethod
    def save(self, document: RedirectDocument) -> None:
        """Overwrite the backing medium with document.

        Raises:
            StoreWriteError: If the backing medium cannot be written.
        """
        pass


def document_from_mapping(data: Any, source: str) -> RedirectDocument:
    """Build a RedirectDocument from a parsed mapping.

    Scalar values are coerced to strings so ids compare loosely.

    Args:
        data: Parsed document root.
        source: Description of where data came from, for error messages.

    Raises:
        StoreReadError: If the shape is not a mapping with a sequence of
            mappings under "redirects".
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise StoreReadError(f"{source}: document root must be a mapping")

    extra = {key: value for key, value in data.items() if key != "redirects"}
    entries = data.get("redirects")
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        raise StoreReadError(f"{source}: 'redirects' must be a sequence")

    redirects = []
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise StoreReadError(f"{source}: redirect #{position} must be a mapping")
        redirects.append(
            RawRedirect(
                alias=_as_str(entry.get("alias")),
                destination=_as_str(entry.get("destination")),
                id=_as_str(entry.get("id")),
            )
        )
    return RedirectDocument(redirects=redirects, extra=extra)


def document_to_mapping(document: RedirectDocument) -> dict[str, Any]:
    """Inverse of document_from_mapping; redirects key first."""
    data: dict[str, Any] = {"redirects": [raw.to_dict() for raw in document.redirects]}
    data.update(document.extra)
    return data


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)
