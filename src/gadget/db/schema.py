"""Database schema for the SQL redirect store.

The redirects table mirrors the YAML document: one row per redirect,
ordered by position. Extra document keys live in store_meta as JSON.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class RedirectRow(Base):
    """A stored redirect. position is the document order."""

    __tablename__ = "redirects"

    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    public_ref: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    alias: Mapped[str] = mapped_column(String(512), nullable=False)
    destination: Mapped[str] = mapped_column(Text, nullable=False)


class StoreMeta(Base):
    """Top-level document keys other than redirects."""

    __tablename__ = "store_meta"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value_json: Mapped[str] = mapped_column(Text, nullable=False)
