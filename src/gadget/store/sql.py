"""SQL store backed by SQLAlchemy.

Same whole-document contract as the YAML store: save() replaces every
row inside one session, load() reads every row back in position order.
"""

from __future__ import annotations

import json

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from gadget.db.schema import RedirectRow, StoreMeta
from gadget.errors import StoreReadError, StoreWriteError
from gadget.models.domain import RawRedirect, RedirectDocument
from gadget.store.base import RedirectStore


def _row_to_raw(row: RedirectRow) -> RawRedirect:
    """Convert SQLAlchemy RedirectRow to a stored redirect."""
    return RawRedirect(alias=row.alias, destination=row.destination, id=row.public_ref)


class SqlStore(RedirectStore):
    """Store backed by the redirects/store_meta tables."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def load(self) -> RedirectDocument:
        try:
            with self._session_factory() as session:
                rows = session.scalars(select(RedirectRow).order_by(RedirectRow.position)).all()
                meta = session.scalars(select(StoreMeta).order_by(StoreMeta.key)).all()
                return RedirectDocument(
                    redirects=[_row_to_raw(row) for row in rows],
                    extra={item.key: json.loads(item.value_json) for item in meta},
                )
        except SQLAlchemyError as e:
            raise StoreReadError(f"Cannot load redirects from database: {e}") from e
        except json.JSONDecodeError as e:
            raise StoreReadError(f"Corrupt store metadata: {e}") from e

    def save(self, document: RedirectDocument) -> None:
        try:
            with self._session_factory() as session:
                session.execute(delete(RedirectRow))
                session.execute(delete(StoreMeta))
                session.add_all(
                    RedirectRow(
                        position=position,
                        public_ref=raw.id,
                        alias=raw.alias,
                        destination=raw.destination,
                    )
                    for position, raw in enumerate(document.redirects)
                )
                session.add_all(
                    StoreMeta(key=key, value_json=json.dumps(value))
                    for key, value in document.extra.items()
                )
                session.commit()
        except SQLAlchemyError as e:
            raise StoreWriteError(f"Cannot save redirects to database: {e}") from e
        except TypeError as e:
            raise StoreWriteError(f"Store metadata is not JSON-serializable: {e}") from e
