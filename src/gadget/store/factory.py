"""Build the store selected by configuration."""

from __future__ import annotations

from gadget.config import Settings
from gadget.db.session import get_session_factory
from gadget.store.base import RedirectStore
from gadget.store.memory import MemoryStore
from gadget.store.sql import SqlStore
from gadget.store.yaml_store import YamlStore


def open_store(settings: Settings) -> RedirectStore:
    """Create the store named by settings.store."""
    if settings.store == "memory":
        return MemoryStore()
    if settings.store == "sqlite":
        return SqlStore(get_session_factory(settings.db_path))
    return YamlStore(settings.store_path)
