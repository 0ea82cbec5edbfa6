"""Shared pytest fixtures for gadget tests."""

import pytest
import yaml
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gadget.db.schema import Base
from gadget.models.domain import RawRedirect, RedirectDocument
from gadget.store.memory import MemoryStore
from gadget.store.yaml_store import YamlStore


@pytest.fixture
def sample_document() -> RedirectDocument:
    """Document with one well-formed redirect."""
    return RedirectDocument(
        redirects=[
            RawRedirect(alias="url:gadget:short:foo", destination="http://x.com", id="abc123"),
        ]
    )


@pytest.fixture
def three_redirects() -> RedirectDocument:
    """Document with three redirects in a known order."""
    return RedirectDocument(
        redirects=[
            RawRedirect(alias="url:gadget:short:a", destination="http://a.com", id="id1"),
            RawRedirect(alias="url:gadget:short:b", destination="http://b.com", id="id2"),
            RawRedirect(alias="url:gadget:short:c", destination="http://c.com", id="id3"),
        ]
    )


@pytest.fixture
def memory_store(sample_document) -> MemoryStore:
    """Memory store seeded with sample_document."""
    return MemoryStore(sample_document)


@pytest.fixture
def yaml_path(tmp_path):
    """Path of a YAML document holding the sample redirect."""
    path = tmp_path / "redirects.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "redirects": [
                    {"alias": "url:gadget:short:foo", "destination": "http://x.com", "id": "abc123"},
                ]
            },
            sort_keys=False,
        )
    )
    return path


@pytest.fixture
def yaml_store(yaml_path) -> YamlStore:
    """YAML store over yaml_path."""
    return YamlStore(yaml_path)


@pytest.fixture
def session_factory():
    """Session factory over an in-memory SQLite database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
