"""Tests for the redirect alias codec."""

import pytest

from gadget.core.codec import decode_alias, decode_record, encode_alias, encode_record
from gadget.errors import AliasDecodeError
from gadget.models.domain import RawRedirect, RedirectEntity


class TestEncodeAlias:
    """Tests for encode_alias."""

    def test_encodes_with_prefix(self):
        assert encode_alias("short", "bar") == "url:gadget:short:bar"

    def test_empty_parts_pass_through(self):
        """No validation: empty type and alias are encoded as given."""
        assert encode_alias("", "") == "url:gadget::"


class TestDecodeAlias:
    """Tests for decode_alias."""

    def test_decodes_type_and_alias(self):
        assert decode_alias("url:gadget:short:foo") == ("short", "foo")

    @pytest.mark.parametrize(
        "redirect_type,alias",
        [("short", "foo"), ("alias", "google"), ("direct", "docs/python"), ("x", "")],
    )
    def test_round_trip(self, redirect_type, alias):
        """decode(encode(t, a)) == (t, a) when neither contains ':'."""
        assert decode_alias(encode_alias(redirect_type, alias)) == (redirect_type, alias)

    def test_too_few_segments_raises(self):
        with pytest.raises(AliasDecodeError) as exc_info:
            decode_alias("url:gadget:short")
        assert exc_info.value.raw_alias == "url:gadget:short"

    def test_wrong_prefix_raises(self):
        with pytest.raises(AliasDecodeError):
            decode_alias("urn:other:short:foo")

    def test_extra_colon_truncates_alias(self):
        """No escaping: a colon inside the alias is lost on decode."""
        assert decode_alias(encode_alias("short", "a:b")) == ("short", "a")


class TestDecodeRecord:
    """Tests for decode_record."""

    def test_success_result(self):
        raw = RawRedirect(alias="url:gadget:short:foo", destination="http://x.com", id="abc123")

        result = decode_record(raw)

        assert result.entity is not None
        assert result.failure is None
        assert result.entity == RedirectEntity(
            id="abc123", type="short", alias="foo", destination="http://x.com"
        )

    def test_failure_result(self):
        """Malformed rows produce an explicit failure, never a half-filled entity."""
        raw = RawRedirect(alias="garbage", destination="http://x.com", id="bad1")

        result = decode_record(raw)

        assert result.failure is not None
        assert result.entity is None
        assert result.failure.id == "bad1"
        assert result.failure.raw_alias == "garbage"
        assert "segments" in result.failure.reason


class TestEncodeRecord:
    """Tests for encode_record."""

    def test_encodes_entity(self):
        entity = RedirectEntity(id="abc123", type="short", alias="foo", destination="http://x.com")
        assert encode_record(entity) == RawRedirect(
            alias="url:gadget:short:foo", destination="http://x.com", id="abc123"
        )
