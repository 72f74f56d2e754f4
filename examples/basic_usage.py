"""Basic usage example for textlist."""

from textlist import TextList


def main() -> None:
    """Demonstrate basic list operations."""
    lst = TextList()

    print("=== Building a list ===\n")
    apple = lst.append("apple")
    lst.append("banana")
    lst.append(None)
    lst.append("banana")
    lst.display()

    print("\n=== Searching ===\n")
    print(f"find('banana') -> {lst.find('banana')}")
    print(f"find('durian') -> {lst.find('durian')}")
    print(f"find(None) finds the null element: {lst.find(None) is not None}")
    print(f"find('') does not: {lst.find('') is None}")

    print("\n=== Removing ===\n")
    print(f"remove_value('banana') -> {lst.remove_value('banana')}")
    print(f"remove(apple) -> {lst.remove(apple)}")
    print(f"remove(apple) again -> {lst.remove(apple)}")
    lst.display()

    lst.clear()
    print(f"\nAfter clear: {lst}")


if __name__ == "__main__":
    main()
