"""Resource Store — tests for ordered append, lookup, index, removal, reset."""

from dataclasses import dataclass

from app.infrastructure.resource_store import ResourceStore


@dataclass
class Item:
    id: str


def _store() -> ResourceStore[Item]:
    return ResourceStore("items", [Item("a"), Item("b"), Item("c")])


def test_list_preserves_insertion_order():
    store = _store()
    store.append(Item("d"))
    assert [i.id for i in store.list()] == ["a", "b", "c", "d"]
    assert len(store) == 4


def test_find_by_id():
    store = _store()
    assert store.find_by_id("b").id == "b"
    assert store.find_by_id("zzz") is None


def test_index_by_id():
    store = _store()
    assert store.index_by_id("c") == 2
    assert store.index_by_id("zzz") is None


def test_remove_at_shifts_following_records():
    store = _store()
    removed = store.remove_at(1)
    assert removed.id == "b"
    assert [i.id for i in store.list()] == ["a", "c"]
    assert store.index_by_id("c") == 1


def test_store_does_not_enforce_uniqueness():
    store = _store()
    store.append(Item("a"))
    assert len(store) == 4
    assert store.index_by_id("a") == 0


def test_reset_replaces_contents():
    store = _store()
    store.reset([Item("x")])
    assert [i.id for i in store.list()] == ["x"]
    store.reset()
    assert len(store) == 0
