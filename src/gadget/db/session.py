"""Database session management.

Provides session factories for SQLite database access with proper
thread-safety for FastAPI concurrency.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gadget.config import DEFAULT_DB_PATH
from gadget.db.schema import Base

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}


def get_engine(db_path: Path | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by resolved db_path. Uses StaticPool and
    check_same_thread=False so the sync route handlers can share the
    connection from FastAPI's threadpool.

    Args:
        db_path: Path to SQLite database file. Defaults to data/gadget.db.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    if db_path is None:
        db_path = DEFAULT_DB_PATH

    db_path = Path(db_path)
    cache_key = str(db_path.resolve())

    if cache_key in _engine_cache:
        return _engine_cache[cache_key]

    # Create parent directories only when creating a new engine
    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _engine_cache[cache_key] = engine

    return engine


def init_db(engine: Engine) -> None:
    """Create the store tables if missing."""
    Base.metadata.create_all(engine)


def get_session_factory(db_path: Path | None = None) -> sessionmaker:
    """Get a session factory bound to an initialized database.

    Args:
        db_path: Path to SQLite database file.

    Returns:
        sessionmaker instance.
    """
    engine = get_engine(db_path)
    init_db(engine)
    return sessionmaker(bind=engine)
