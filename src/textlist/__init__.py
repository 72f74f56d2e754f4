"""textlist - Doubly-linked list of text values with O(1) handle-based removal."""

from textlist.errors import (
    AllocationError,
    CorruptListError,
    InvalidHandleError,
    TextListError,
)
from textlist.handle import Handle
from textlist.linkedlist import TextList
from textlist.types import AllocationPolicy, Text

__version__ = "0.0.1"

__all__ = [
    "TextList",
    "Handle",
    "TextListError",
    "AllocationError",
    "InvalidHandleError",
    "CorruptListError",
    "AllocationPolicy",
    "Text",
]
