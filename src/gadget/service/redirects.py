"""Redirect CRUD service.

Every operation loads the whole document from the injected store, works
on it in memory and, for mutations, saves the whole document back.
There is no locking: two concurrent writers both read the same state and
the second save wins.
"""

from __future__ import annotations

import logging
from typing import Callable

from gadget.core.codec import decode_record, encode_alias
from gadget.core.identity import generate_redirect_id
from gadget.errors import MalformedRedirectError, RedirectNotFoundError
from gadget.models.domain import RawRedirect, RedirectEntity, RedirectListing
from gadget.store.base import RedirectStore

logger = logging.getLogger(__name__)


class RedirectService:
    """List, get, create, update and delete redirects."""

    def __init__(
        self,
        store: RedirectStore,
        id_factory: Callable[[], str] = generate_redirect_id,
    ):
        """Initialize service.

        Args:
            store: Document store to load from and save to.
            id_factory: Produces ids for new redirects.
        """
        self.store = store
        self._id_factory = id_factory

    def list(self) -> RedirectListing:
        """Decode every stored redirect, in stored order.

        Rows whose alias cannot be decoded are reported in
        RedirectListing.malformed instead of being returned half-filled.
        """
        document = self.store.load()
        listing = RedirectListing()
        for raw in document.redirects:
            result = decode_record(raw)
            if result.entity is not None:
                listing.redirects.append(result.entity)
            elif result.failure is not None:
                logger.warning(
                    f"Malformed redirect {result.failure.id!r}: {result.failure.reason}"
                )
                listing.malformed.append(result.failure)
        return listing

    def get(self, redirect_id: str) -> RedirectEntity:
        """Get redirect by id.

        Raises:
            RedirectNotFoundError: No redirect has this id.
            MalformedRedirectError: The matching row cannot be decoded.
        """
        document = self.store.load()
        index = document.index_of(redirect_id)
        if index is None:
            raise RedirectNotFoundError(redirect_id)

        result = decode_record(document.redirects[index])
        if result.entity is None:
            reason = result.failure.reason if result.failure else "undecodable alias"
            raise MalformedRedirectError(redirect_id, reason)
        return result.entity

    def create(self, redirect_type: str, alias: str, destination: str) -> RedirectEntity:
        """Append a new redirect with a freshly generated id.

        No validation is applied; empty strings are stored as given.
        """
        document = self.store.load()
        redirect_id = self._id_factory()
        document.redirects.append(
            RawRedirect(
                alias=encode_alias(redirect_type, alias),
                destination=destination,
                id=redirect_id,
            )
        )
        self.store.save(document)

        logger.info(f"Created redirect {redirect_id}: {redirect_type}:{alias} => {destination}")
        return RedirectEntity(
            id=redirect_id,
            type=redirect_type,
            alias=alias,
            destination=destination,
        )

    def update(self, redirect_id: str, destination: str) -> RedirectEntity:
        """Replace the destination of a redirect, keeping its id, alias and position.

        Raises:
            RedirectNotFoundError: No redirect has this id.
            MalformedRedirectError: The matching row cannot be decoded.
        """
        document = self.store.load()
        index = document.index_of(redirect_id)
        if index is None:
            raise RedirectNotFoundError(redirect_id)

        raw = document.redirects[index]
        result = decode_record(raw)
        if result.entity is None:
            reason = result.failure.reason if result.failure else "undecodable alias"
            raise MalformedRedirectError(redirect_id, reason)

        raw.destination = destination
        self.store.save(document)

        logger.info(f"Updated redirect {redirect_id} => {destination}")
        result.entity.destination = destination
        return result.entity

    def delete(self, redirect_id: str) -> bool:
        """Remove the first redirect whose id matches.

        Deleting an unknown id is a no-op: nothing is written.

        Returns:
            True if a redirect was removed.
        """
        document = self.store.load()
        index = document.index_of(redirect_id)
        if index is None:
            logger.debug(f"Delete of unknown redirect {redirect_id!r} ignored")
            return False

        del document.redirects[index]
        self.store.save(document)

        logger.info(f"Deleted redirect {redirect_id}")
        return True
