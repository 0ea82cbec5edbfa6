"""In-memory store for tests and demos."""

from __future__ import annotations

import copy

from gadget.models.domain import RedirectDocument
from gadget.store.base import RedirectStore


class MemoryStore(RedirectStore):
    """Store that keeps the document in process memory.

    Loads and saves deep copies, so callers only change stored state
    through save().
    """

    def __init__(self, document: RedirectDocument | None = None):
        self._document = copy.deepcopy(document) if document else RedirectDocument()
        self.save_count = 0

    def load(self) -> RedirectDocument:
        return copy.deepcopy(self._document)

    def save(self, document: RedirectDocument) -> None:
        self._document = copy.deepcopy(document)
        self.save_count += 1
