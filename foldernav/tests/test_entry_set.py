from __future__ import annotations

from foldernav.history.EntrySet import EntrySet


def test_insert_rejects_duplicates():
    entries = EntrySet()

    assert entries.insert("a.txt") is True
    assert entries.insert("a.txt") is False
    assert list(entries.list()) == ["a.txt"]


def test_remove_reports_found():
    entries = EntrySet(["a", "b"])

    assert entries.remove("a") is True
    assert entries.remove("a") is False
    assert list(entries) == ["b"]


def test_contains_and_membership_operator():
    entries = EntrySet(["Documents"])

    assert entries.contains("Documents")
    assert "Documents" in entries
    assert not entries.contains("documents")


def test_listing_keeps_insertion_order():
    entries = EntrySet(["z", "a", "m"])

    assert list(entries.list()) == ["z", "a", "m"]


def test_empty_set_lists_nothing():
    entries = EntrySet()

    assert list(entries.list()) == []
    assert len(entries) == 0
    assert not entries
    assert EntrySet.EMPTY_MARKER == "(empty)"


def test_clear_empties_the_set():
    entries = EntrySet(["a", "b"])
    entries.clear()

    assert len(entries) == 0
    assert entries.insert("a") is True


def test_snapshot_is_independent():
    live = EntrySet(["a", "b"])
    copy = live.snapshot()

    live.insert("c")
    live.remove("a")
    copy.insert("d")

    assert list(copy) == ["a", "b", "d"]
    assert list(live) == ["b", "c"]
    assert copy.entries is not live.entries


def test_equality_ignores_order():
    assert EntrySet(["a", "b"]) == EntrySet(["b", "a"])
    assert EntrySet(["a"]) != EntrySet(["a", "b"])


def test_listing_survives_mutation_during_iteration():
    entries = EntrySet(["a", "b", "c"])

    seen = []
    for name in entries.list():
        seen.append(name)
        entries.remove(name)

    assert seen == ["a", "b", "c"]
    assert len(entries) == 0
