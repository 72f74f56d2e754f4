"""Element handles."""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class Handle:
    """Immutable, opaque reference to one element of a TextList."""

    token: str  # UUID-based unique identifier

    @classmethod
    def create(cls) -> "Handle":
        """Create a new handle with a unique token."""
        return cls(token=str(uuid.uuid4()))
