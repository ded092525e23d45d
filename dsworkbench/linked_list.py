"""A singly linked list of integers that can split itself in two."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator


class IntList:
    """A list of integers where new elements go to the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque()
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` at the head of the list."""
        self._items.appendleft(value)

    def remove(self) -> int | None:
        """Remove and return the head element; return None when the list is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def show(self) -> str:
        """Return a line with the element count followed by the elements from the head."""
        body = "".join(f"{value} " for value in self._items)
        return f"List of {len(self._items)} elements: {body}\n"

    def extract_largest(self) -> int | None:
        """Remove and return the largest element, the one nearest the head on ties.

        Returns None when the list is empty.
        """
        if not self._items:
            return None
        largest = max(self._items)
        self._items.remove(largest)
        return largest

    def split_odd_even(self) -> IntList:
        """Move the odd elements into a new list and keep the even ones here.

        Odd elements are inserted into the new list in the order they are met,
        so they end up there in reverse order.
        """
        odd = IntList()
        kept: deque[int] = deque()
        for value in self._items:
            if value % 2:
                odd.insert(value)
            else:
                kept.append(value)
        self._items = kept
        return odd

    def split_big_small(self) -> IntList:
        """Move the larger half of the elements into a new list and return it.

        With an odd number of elements the returned list holds one fewer than
        the list that is left behind. The largest values are extracted one by
        one and inserted at the head, so the new list runs from small to large.
        """
        big = IntList()
        for _ in range(len(self._items) // 2):
            big.insert(self.extract_largest())
        return big

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"