"""Exception hierarchy for Gadget.

Store failures propagate to the HTTP layer, which turns them into a
generic 500. Lookup failures become 404/422 in the routes.
"""

from __future__ import annotations


class GadgetError(Exception):
    """Base class for all Gadget errors."""


class ConfigError(GadgetError):
    """Invalid configuration value."""


class StoreError(GadgetError):
    """Backing store could not be read or written."""


class StoreReadError(StoreError):
    """Backing store could not be loaded."""


class StoreWriteError(StoreError):
    """Backing store could not be saved."""


class AliasDecodeError(GadgetError):
    """Stored alias string is not of the form url:gadget:<type>:<alias>."""

    def __init__(self, raw_alias: str, reason: str):
        super().__init__(f"Unable to decode alias {raw_alias!r}: {reason}")
        self.raw_alias = raw_alias
        self.reason = reason


class RedirectNotFoundError(GadgetError):
    """No redirect with the requested id."""

    def __init__(self, redirect_id: str):
        super().__init__(f"Redirect not found: {redirect_id}")
        self.redirect_id = redirect_id


class MalformedRedirectError(GadgetError):
    """Redirect exists but its stored alias cannot be decoded."""

    def __init__(self, redirect_id: str, reason: str):
        super().__init__(f"Redirect {redirect_id} is malformed: {reason}")
        self.redirect_id = redirect_id
        self.reason = reason
