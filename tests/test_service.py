"""Tests for RedirectService.

Properties:
1. list() decodes every row in stored order
2. create() appends exactly one record with a fresh id
3. delete() removes exactly one record and keeps order
4. delete() of an absent id changes nothing
5. malformed rows are reported, never half-filled
"""

import pytest
import yaml

from gadget.core.identity import REDIRECT_ID_ALPHABET
from gadget.errors import MalformedRedirectError, RedirectNotFoundError
from gadget.models.domain import RawRedirect, RedirectDocument, RedirectEntity
from gadget.service.redirects import RedirectService
from gadget.store.memory import MemoryStore
from gadget.store.yaml_store import YamlStore


class TestList:
    """Tests for RedirectService.list."""

    def test_decodes_sample(self, memory_store):
        listing = RedirectService(memory_store).list()

        assert listing.redirects == [
            RedirectEntity(id="abc123", type="short", alias="foo", destination="http://x.com")
        ]
        assert listing.malformed == []

    def test_keeps_stored_order(self, three_redirects):
        service = RedirectService(MemoryStore(three_redirects))

        assert [r.alias for r in service.list().redirects] == ["a", "b", "c"]

    def test_reports_malformed_rows(self):
        store = MemoryStore(
            RedirectDocument(
                redirects=[
                    RawRedirect(alias="url:gadget:short:ok", destination="http://ok", id="good"),
                    RawRedirect(alias="broken", destination="http://bad", id="bad"),
                ]
            )
        )

        listing = RedirectService(store).list()

        assert [r.id for r in listing.redirects] == ["good"]
        assert [f.id for f in listing.malformed] == ["bad"]

    def test_empty_store(self):
        listing = RedirectService(MemoryStore()).list()

        assert listing.redirects == []
        assert listing.malformed == []


class TestGet:
    """Tests for RedirectService.get."""

    def test_returns_entity(self, memory_store):
        entity = RedirectService(memory_store).get("abc123")

        assert entity.alias == "foo"
        assert entity.type == "short"

    def test_missing_raises(self, memory_store):
        with pytest.raises(RedirectNotFoundError):
            RedirectService(memory_store).get("nope")

    def test_malformed_raises(self):
        store = MemoryStore(
            RedirectDocument(redirects=[RawRedirect(alias="broken", destination="d", id="bad")])
        )

        with pytest.raises(MalformedRedirectError):
            RedirectService(store).get("bad")


class TestCreate:
    """Tests for RedirectService.create."""

    def test_appends_one_record(self, memory_store):
        service = RedirectService(memory_store)
        before = len(service.list().redirects)

        created = service.create("short", "bar", "http://y.com")

        redirects = service.list().redirects
        assert len(redirects) == before + 1
        assert redirects[-1] == created
        assert created.type == "short"
        assert created.alias == "bar"
        assert created.destination == "http://y.com"

    def test_generates_ten_char_lowercase_id(self, memory_store):
        created = RedirectService(memory_store).create("short", "bar", "http://y.com")

        assert len(created.id) == 10
        assert set(created.id) <= set(REDIRECT_ID_ALPHABET)

    def test_encodes_alias_in_file(self, tmp_path):
        """create on an empty store writes one url:gadget:<type>:<alias> row."""
        path = tmp_path / "redirects.yaml"
        store = YamlStore(path)
        store.initialize()

        RedirectService(store).create("short", "bar", "http://y.com")

        data = yaml.safe_load(path.read_text())
        assert len(data["redirects"]) == 1
        assert data["redirects"][0]["alias"] == "url:gadget:short:bar"
        assert data["redirects"][0]["destination"] == "http://y.com"

    def test_uses_id_factory(self):
        service = RedirectService(MemoryStore(), id_factory=lambda: "fixedid000")

        assert service.create("short", "a", "b").id == "fixedid000"

    def test_no_uniqueness_check(self):
        """Duplicate ids are not rejected."""
        service = RedirectService(MemoryStore(), id_factory=lambda: "sameid0000")

        service.create("short", "a", "http://a")
        service.create("short", "b", "http://b")

        assert [r.id for r in service.list().redirects] == ["sameid0000", "sameid0000"]

    def test_empty_fields_pass_through(self):
        service = RedirectService(MemoryStore())

        created = service.create("", "", "")

        assert service.store.load().redirects[0].alias == "url:gadget::"
        assert created.destination == ""


class TestUpdate:
    """Tests for RedirectService.update."""

    def test_changes_destination_in_place(self, three_redirects):
        service = RedirectService(MemoryStore(three_redirects))

        updated = service.update("id2", "http://new.com")

        assert updated.destination == "http://new.com"
        assert updated.alias == "b"
        redirects = service.list().redirects
        assert [r.id for r in redirects] == ["id1", "id2", "id3"]
        assert redirects[1].destination == "http://new.com"

    def test_missing_raises(self, memory_store):
        with pytest.raises(RedirectNotFoundError):
            RedirectService(memory_store).update("nope", "http://new.com")

    def test_missing_does_not_save(self, memory_store):
        with pytest.raises(RedirectNotFoundError):
            RedirectService(memory_store).update("nope", "http://new.com")

        assert memory_store.save_count == 0


class TestDelete:
    """Tests for RedirectService.delete."""

    def test_delete_sample_empties_store(self, memory_store):
        service = RedirectService(memory_store)

        assert service.delete("abc123") is True
        assert memory_store.load().redirects == []

    def test_preserves_order_of_others(self, three_redirects):
        service = RedirectService(MemoryStore(three_redirects))

        service.delete("id2")

        assert [r.id for r in service.list().redirects] == ["id1", "id3"]

    def test_removes_only_first_match(self):
        store = MemoryStore(
            RedirectDocument(
                redirects=[
                    RawRedirect(alias="url:gadget:s:a", destination="1", id="dup"),
                    RawRedirect(alias="url:gadget:s:b", destination="2", id="dup"),
                ]
            )
        )

        RedirectService(store).delete("dup")

        assert [r.destination for r in store.load().redirects] == ["2"]

    def test_absent_id_is_noop(self, memory_store):
        service = RedirectService(memory_store)
        before = memory_store.load()

        assert service.delete("nope") is False
        assert service.delete("nope") is False

        assert memory_store.load() == before
        assert memory_store.save_count == 0

    def test_repeated_delete_idempotent(self, memory_store):
        service = RedirectService(memory_store)
        service.delete("abc123")
        after_first = memory_store.load()

        service.delete("abc123")

        assert memory_store.load() == after_first

    def test_delete_from_yaml_file(self, yaml_store, yaml_path):
        RedirectService(yaml_store).delete("abc123")

        assert yaml.safe_load(yaml_path.read_text())["redirects"] == []
