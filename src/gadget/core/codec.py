"""Redirect alias codec.

Stored aliases are flat namespaced strings:

    url:gadget:<type>:<alias>

There is no escaping. A type or alias containing ':' does not survive a
round trip.
"""

from __future__ import annotations

from gadget.errors import AliasDecodeError
from gadget.models.domain import (
    DecodeFailure,
    DecodeResult,
    RawRedirect,
    RedirectEntity,
)

ALIAS_PREFIX = "url:gadget:"
ALIAS_SEPARATOR = ":"
MIN_SEGMENTS = 4


def encode_alias(redirect_type: str, alias: str) -> str:
    """Encode a type/alias pair into the stored alias string."""
    return f"{ALIAS_PREFIX}{redirect_type}{ALIAS_SEPARATOR}{alias}"


def decode_alias(raw_alias: str) -> tuple[str, str]:
    """Decode a stored alias string.

    Args:
        raw_alias: Stored alias, e.g. "url:gadget:short:foo".

    Returns:
        Tuple of (type, alias).

    Raises:
        AliasDecodeError: If the string has fewer than 4 segments or the
            wrong prefix.
    """
    segments = raw_alias.split(ALIAS_SEPARATOR)
    if len(segments) < MIN_SEGMENTS:
        raise AliasDecodeError(
            raw_alias, f"expected {MIN_SEGMENTS} ':'-separated segments, got {len(segments)}"
        )
    if ALIAS_SEPARATOR.join(segments[:2]) + ALIAS_SEPARATOR != ALIAS_PREFIX:
        raise AliasDecodeError(raw_alias, f"expected prefix {ALIAS_PREFIX!r}")
    return segments[2], segments[3]


def decode_record(raw: RawRedirect) -> DecodeResult:
    """Decode a stored row into an explicit success or failure result."""
    try:
        redirect_type, alias = decode_alias(raw.alias)
    except AliasDecodeError as e:
        return DecodeResult(failure=DecodeFailure(id=raw.id, raw_alias=raw.alias, reason=e.reason))

    return DecodeResult(
        entity=RedirectEntity(
            id=raw.id,
            type=redirect_type,
            alias=alias,
            destination=raw.destination,
        )
    )


def encode_record(entity: RedirectEntity) -> RawRedirect:
    """Encode a redirect entity into its stored row."""
    return RawRedirect(
        alias=encode_alias(entity.type, entity.alias),
        destination=entity.destination,
        id=entity.id,
    )
