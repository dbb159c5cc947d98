from __future__ import annotations

from foldernav.history.EntrySet import EntrySet
from foldernav.history.HistoryStack import HistoryFrame, HistoryStack


def test_new_stack_is_empty():
    stack = HistoryStack()

    assert stack.is_empty()
    assert stack.pop() is None
    assert stack.peek() is None
    assert len(stack) == 0


def test_pop_returns_most_recent_first():
    stack = HistoryStack()
    stack.push("root", EntrySet(["a"]))
    stack.push("a", EntrySet(["b"]))

    top = stack.pop()
    assert isinstance(top, HistoryFrame)
    assert top.folder_name == "a"
    assert list(top.snapshot) == ["b"]
    assert stack.pop().folder_name == "root"
    assert stack.is_empty()


def test_push_stores_a_copy():
    live = EntrySet(["a"])
    stack = HistoryStack()
    stack.push("root", live)

    live.insert("b")
    live.remove("a")

    frame = stack.pop()
    assert list(frame.snapshot) == ["a"]
    assert frame.snapshot is not live


def test_popped_frame_is_no_longer_held():
    stack = HistoryStack()
    stack.push("root", EntrySet(["a"]))

    frame = stack.pop()

    assert all(f is not frame for f in stack.stack)
    assert stack.is_empty()


def test_clear_drops_all_frames():
    stack = HistoryStack()
    for name in ("a", "b", "c"):
        stack.push(name, EntrySet())

    stack.clear()

    assert stack.is_empty()
    assert stack.pop() is None


def test_peek_does_not_remove():
    stack = HistoryStack()
    stack.push("root", EntrySet())

    assert stack.peek() == "root"
    assert len(stack) == 1


def test_max_size_drops_oldest_frame():
    stack = HistoryStack(max_size=2)
    stack.push("one", EntrySet())
    stack.push("two", EntrySet())
    assert stack.is_full()

    stack.push("three", EntrySet())

    assert len(stack) == 2
    assert stack.pop().folder_name == "three"
    assert stack.pop().folder_name == "two"
    assert stack.pop() is None


def test_unlimited_stack_is_never_full():
    stack = HistoryStack()
    for i in range(50):
        stack.push(str(i), EntrySet())

    assert not stack.is_full()
    assert len(stack) == 50
