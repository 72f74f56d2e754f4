"""Demonstration entry point: self-test, then print a small list."""

import logging

from textlist import selftest
from textlist.linkedlist import TextList


def main() -> int:
    """Run the self-test and a short demo. Returns the process exit status."""
    logging.basicConfig(level=logging.WARNING)

    selftest.run()

    lst = TextList(on_alloc_failure="abort")
    lst.append("hello")
    lst.append("world")
    lst.display()
    lst.clear()

    print("All tests passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
