"""Type definitions for textlist."""

from typing import Literal, TypeAlias

# Stored element value; None is "no string", distinct from ""
Text: TypeAlias = str | None

# Policy for handling allocation failure in append()
AllocationPolicy: TypeAlias = Literal["raise", "abort"]
