"""Tests stores — mémoire + SQLAlchemy, round-trip des documents."""
import pytest

from hero_builder import (
    DataIntegrityError, MemoryContentStore, SqlContentStore, dump_document, load_document, save_document,
)
from conftest import load_seed


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemoryContentStore()
    return SqlContentStore.from_path(str(tmp_path / "hero.db"))


def test_missing_document(store):
    assert store.get("home", "hero-1") is None
    assert load_document(store, "home", "hero-1") is None


def test_save_and_load_round_trip(store, demo_block):
    save_document(store, "home", "hero-1", demo_block)
    assert load_document(store, "home", "hero-1") == demo_block
    assert store.get("home", "hero-1") == dump_document(demo_block)


def test_overwrite(store, demo_block):
    save_document(store, "home", "hero-1", demo_block)
    edited = demo_block.model_copy(update={"texts": demo_block.texts[:1]})
    save_document(store, "home", "hero-1", edited)
    assert [t.id for t in load_document(store, "home", "hero-1").texts] == ["text-title"]


def test_documents_keyed_by_page_and_block(store, demo_block):
    save_document(store, "home", "hero-1", demo_block)
    assert store.get("about", "hero-1") is None
    assert store.get("home", "hero-2") is None


def test_legacy_documents_migrated_on_load(store):
    store.put("home", "old", load_seed("legacy_hero.json"))
    block = load_document(store, "home", "old")
    assert block.buttons[0].label == "Kontakt"


def test_corrupt_document_raises(store):
    data = load_seed("demo_hero.json")
    del data["texts"][0]["position"]["desktop"]
    store.put("home", "bad", data)
    with pytest.raises(DataIntegrityError):
        load_document(store, "home", "bad")


def test_sqlite_persists_across_instances(tmp_path, demo_block):
    path = str(tmp_path / "hero.db")
    save_document(SqlContentStore.from_path(path), "home", "hero-1", demo_block)
    assert load_document(SqlContentStore.from_path(path), "home", "hero-1") == demo_block
