"""Built-in self-test run by the demo entry point.

Each check uses plain ``assert``; a failure propagates as AssertionError.
"""

from textlist.linkedlist import TextList


def check_basic_ops() -> None:
    """Append, find and drain a list by value."""
    lst = TextList()
    assert len(lst) == 0

    for value in ("apple", "banana", "cherry", "banana"):
        lst.append(value)
    assert len(lst) == 4

    assert lst.find("banana") is not None
    assert lst.find("durian") is None

    # First "banana" goes, the second remains
    assert lst.remove_value("banana")
    assert len(lst) == 3
    assert lst.find("banana") is not None

    # Head
    assert lst.remove_value("apple")
    assert len(lst) == 2

    # Tail
    assert lst.remove_value("banana")
    assert len(lst) == 1

    assert lst.remove_value("cherry")
    assert len(lst) == 0

    assert not lst.remove_value("nope")

    lst.clear()
    assert len(lst) == 0


def check_remove_by_handle() -> None:
    """Remove the middle element through its handle."""
    lst = TextList()
    a = lst.append("A")
    b = lst.append("B")
    c = lst.append("C")

    assert len(lst) == 3
    assert lst.remove(b)
    assert len(lst) == 2
    assert lst.find("B") is None
    assert lst.find("A") == a
    assert lst.find("C") == c

    lst.clear()


def run() -> None:
    """Run every self-test check."""
    check_basic_ops()
    check_remove_by_handle()
