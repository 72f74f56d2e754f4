"""Doubly-linked list of text values with handle-based O(1) removal."""

import logging
import sys
from collections.abc import Iterator
from typing import NoReturn, TextIO, get_args

from textlist.errors import AllocationError, CorruptListError, InvalidHandleError
from textlist.handle import Handle
from textlist.types import AllocationPolicy, Text

logger = logging.getLogger(__name__)

# Rendered in place of an element holding no string
NULL_TOKEN = "(null)"


class Node:
    """A node in the doubly-linked list."""

    __slots__ = ("handle", "value", "prev", "next")

    def __init__(self, handle: Handle, value: Text) -> None:
        self.handle = handle
        self.value = value
        self.prev: Node | None = None
        self.next: Node | None = None


def _matches(stored: Text, wanted: Text) -> bool:
    """Two absent values match each other; an absent value never matches a string."""
    if stored is None or wanted is None:
        return stored is wanted
    return stored == wanted


class TextList:
    """
    Ordered, mutable sequence of optional text values.

    Every append returns a Handle to the new element. Handles give O(1)
    removal and stay checkable: a handle that was removed, cleared or
    issued by another list is simply not a member.
    """

    def __init__(self, *, on_alloc_failure: AllocationPolicy = "raise") -> None:
        """
        Initialize an empty list.

        Args:
            on_alloc_failure: What append() does when an element cannot be
                allocated:
                - "raise": Raise AllocationError (default)
                - "abort": Log at CRITICAL and terminate the process
        """
        if on_alloc_failure not in get_args(AllocationPolicy):
            raise ValueError(f"Unknown allocation policy: {on_alloc_failure!r}")
        self._on_alloc_failure = on_alloc_failure
        # Sentinel nodes simplify edge cases
        self._head = Node(None, None)  # type: ignore[arg-type]
        self._tail = Node(None, None)  # type: ignore[arg-type]
        self._head.next = self._tail
        self._tail.prev = self._head
        self._nodes: dict[str, Node] = {}
        self._size = 0

    def append(self, value: Text) -> Handle:
        """
        Append a value to the end of the list. O(1).

        Args:
            value: The string to store, or None for "no string"

        Returns:
            Handle to the new element

        Raises:
            TypeError: If value is neither a str nor None
            AllocationError: If the element cannot be allocated and
                on_alloc_failure="raise"
        """
        if value is not None and not isinstance(value, str):
            raise TypeError(f"TextList values must be str or None, not {type(value).__name__}")

        try:
            node = Node(Handle.create(), value)
            self._nodes[node.handle.token] = node
        except MemoryError as exc:
            self._allocation_failed(exc)

        node.prev = self._tail.prev
        node.next = self._tail
        if self._tail.prev is not None:
            self._tail.prev.next = node
        self._tail.prev = node
        self._size += 1
        return node.handle

    def _allocation_failed(self, exc: MemoryError) -> NoReturn:
        if self._on_alloc_failure == "abort":
            logger.critical("Cannot allocate list element, aborting")
            sys.exit(1)
        raise AllocationError("Cannot allocate list element") from exc

    def find(self, value: Text) -> Handle | None:
        """
        Find the first element holding value. O(n).

        Returns:
            Handle of the first match, or None if nothing matches
        """
        for node in self._iter_nodes():
            if _matches(node.value, value):
                return node.handle
        return None

    def remove(self, handle: Handle | None) -> bool:
        """
        Remove the element referenced by handle. O(1).

        Returns:
            True if an element was removed, False if handle is None or is
            not a member of this list
        """
        if handle is None:
            return False
        node = self._nodes.pop(handle.token, None)
        if node is None:
            logger.debug("Ignoring handle %s: not a member of this list", handle.token)
            return False
        self._unlink(node)
        return True

    def remove_value(self, value: Text) -> bool:
        """Remove the first element holding value. O(n). Returns True if one was removed."""
        return self.remove(self.find(value))

    def clear(self) -> None:
        """Remove every element, invalidating all outstanding handles. O(n)."""
        removed = self._size
        node = self._head.next
        while node is not None and node is not self._tail:
            next_node = node.next
            node.prev = None
            node.next = None
            node = next_node
        self._head.next = self._tail
        self._tail.prev = self._head
        self._nodes.clear()
        self._size = 0
        if removed:
            logger.debug("Cleared %d elements", removed)

    def value_of(self, handle: Handle) -> Text:
        """
        Return the value stored in the element referenced by handle.

        Raises:
            InvalidHandleError: If handle is not a member of this list
        """
        node = self._nodes.get(handle.token)
        if node is None:
            raise InvalidHandleError(f"Unknown handle token: {handle.token}")
        return node.value

    @property
    def size(self) -> int:
        """Number of elements in the list."""
        return self._size

    @property
    def first(self) -> Handle | None:
        """Handle of the first element, or None if the list is empty."""
        if self._head.next is self._tail or self._head.next is None:
            return None
        return self._head.next.handle

    @property
    def last(self) -> Handle | None:
        """Handle of the last element, or None if the list is empty."""
        if self._tail.prev is self._head or self._tail.prev is None:
            return None
        return self._tail.prev.handle

    def render(self) -> str:
        """Return a listing such as 'TextList(size=2): ["hello", "world"]'."""
        items = ", ".join(
            f'"{NULL_TOKEN if value is None else value}"' for value in self
        )
        return f"TextList(size={self._size}): [{items}]"

    def display(self, stream: TextIO | None = None) -> None:
        """Write render() and a newline to stream (default: stdout)."""
        if stream is None:
            stream = sys.stdout
        stream.write(self.render() + "\n")

    def check_integrity(self) -> None:
        """
        Verify the link structure against the element count.

        Walks forward from the first element and backward from the last,
        checking that both traversals see the same elements in mirror order.

        Raises:
            CorruptListError: On a broken link, a cycle or a wrong count
        """
        forward: list[Node] = []
        prev = self._head
        node = self._head.next
        while node is not self._tail:
            if node is None:
                raise CorruptListError(f"Forward chain ends after {len(forward)} elements")
            if node.prev is not prev:
                raise CorruptListError(f"Element {len(forward)} has a wrong prev link")
            if self._nodes.get(node.handle.token) is not node:
                raise CorruptListError(f"Element {len(forward)} is not indexed")
            forward.append(node)
            if len(forward) > self._size:
                raise CorruptListError(f"Forward chain is longer than size {self._size}")
            prev = node
            node = node.next

        backward: list[Node] = []
        node = self._tail.prev
        while node is not self._head:
            if node is None or len(backward) >= len(forward):
                raise CorruptListError("Backward chain does not mirror the forward chain")
            backward.append(node)
            node = node.prev

        backward.reverse()
        if any(a is not b for a, b in zip(forward, backward)) or len(backward) != len(forward):
            raise CorruptListError("Backward chain does not mirror the forward chain")
        if len(forward) != self._size or len(self._nodes) != self._size:
            raise CorruptListError(
                f"Size {self._size} does not match {len(forward)} linked elements"
            )

    def _unlink(self, node: Node) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        node.prev = None
        node.next = None
        self._size -= 1

    def _iter_nodes(self) -> Iterator[Node]:
        node = self._head.next
        while node is not None and node is not self._tail:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Text]:
        """Iterate over the stored values from first to last."""
        for node in self._iter_nodes():
            yield node.value

    def __contains__(self, handle: object) -> bool:
        """Return True if handle refers to a current member of this list."""
        return isinstance(handle, Handle) and handle.token in self._nodes

    def __len__(self) -> int:
        """Return the number of elements in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __str__(self) -> str:
        return self.render()
