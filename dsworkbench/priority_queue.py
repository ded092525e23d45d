"""An unordered priority queue of integers that is never left empty."""

from __future__ import annotations

from typing import Iterable, Iterator

HEADER = "Priority Queue is as Follows:-"


class PriorityQueue:
    """Holds integers in insertion order and finds the largest or smallest.

    The queue is created with a first element and refuses to delete its last one.
    """

    def __init__(self, first: int, values: Iterable[int] = ()) -> None:
        self._items: list[int] = [first]
        for value in values:
            self.insert(value)

    def maximum(self) -> int:
        """Return the largest element."""
        return max(self._items)

    def minimum(self) -> int:
        """Return the smallest element."""
        return min(self._items)

    def insert(self, value: int) -> None:
        """Append ``value`` to the queue."""
        self._items.append(value)

    def delete(self, value: int) -> bool:
        """Remove the first occurrence of ``value``; return whether one was found.

        Raises ValueError when the queue holds only one element.
        """
        if len(self._items) == 1:
            raise ValueError("cannot delete the only node")
        try:
            self._items.remove(value)
        except ValueError:
            return False
        return True

    def search(self, value: int) -> bool:
        """Return whether ``value`` is in the queue."""
        return value in self._items

    def display(self) -> str:
        """Return a header line followed by one element per line."""
        return HEADER + "\n" + "".join(f"{value}\n" for value in self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"