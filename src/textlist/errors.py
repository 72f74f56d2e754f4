"""Exception classes for textlist."""


class TextListError(Exception):
    """Base exception for all textlist errors."""


class AllocationError(TextListError, MemoryError):
    """Raised when a new element cannot be allocated and on_alloc_failure='raise'."""


class InvalidHandleError(TextListError):
    """Raised when a handle does not refer to a current member of the list."""


class CorruptListError(TextListError):
    """Raised when an integrity check finds broken links or a wrong count."""
