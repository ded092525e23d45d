"""A doubly linked list of any values, and a list reversal built on it."""

from __future__ import annotations

import sys
from collections import deque
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class DoublyLinkedList(Generic[T]):
    """A list that grows at either end and can hand out its tail as a copy."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(values)

    def add_to_front(self, value: T) -> DoublyLinkedList[T]:
        """Add ``value`` before the first element and return the list."""
        self._items.appendleft(value)
        return self

    def add_to_back(self, value: T) -> DoublyLinkedList[T]:
        """Add ``value`` after the last element and return the list."""
        self._items.append(value)
        return self

    def get_first(self) -> T:
        """Return the first element, leaving it in the list; IndexError when empty."""
        if not self._items:
            raise IndexError("first element of an empty list")
        return self._items[0]

    def get_rest(self) -> DoublyLinkedList[T]:
        """Return a new list of every element but the first; IndexError when empty."""
        if not self._items:
            raise IndexError("rest of an empty list")
        rest = iter(self._items)
        next(rest)
        return DoublyLinkedList(rest)

    def show(self) -> str:
        """Return a line with the element count followed by the elements in order."""
        body = "".join(f"{value} " for value in self._items)
        return f"List of {len(self._items)} elements: {body}\n"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


def reverse(items: DoublyLinkedList[T]) -> DoublyLinkedList[T]:
    """Return a new list holding the elements of ``items`` in reverse order.

    The reversal takes the first element off, reverses the rest and puts that
    element at the back; ``items`` itself is left unchanged.
    """
    pending: list[T] = []
    current = items
    while len(current):
        pending.append(current.get_first())
        current = current.get_rest()
    result: DoublyLinkedList[T] = DoublyLinkedList()
    for value in reversed(pending):
        result.add_to_back(value)
    return result


def main(argv: list[str] | None = None) -> int:
    """Build a small list of words, show it, then show its reversal."""
    words: DoublyLinkedList[str] = DoublyLinkedList()
    words.add_to_back("one(1)")
    words.add_to_front("nine(9)")
    words.add_to_back("eight(8)")
    out = sys.stdout
    out.write("\nBUILD ORIGINAL---------------------------\n")
    out.write(words.show())
    out.write("\nREVERSE ORIGINAL---------------------------\n")
    out.write("\nNew: " + reverse(words).show())
    return 0


if __name__ == "__main__":
    sys.exit(main())