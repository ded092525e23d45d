"""A double-ended queue built from doubly linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node:
    value: Any
    previous: _Node | None = None
    next: _Node | None = None


class LinkedDeque(Generic[T]):
    """A deque with constant-time access to both ends and indexed access.

    Indexed access walks from whichever end is nearer to the index.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: T) -> None:
        """Add ``value`` before the first element."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.previous = node
        self._head = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Add ``value`` after the last element."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _Node) -> T:
        if node.previous is None:
            self._head = node.next
        else:
            node.previous.next = node.next
        if node.next is None:
            self._tail = node.previous
        else:
            node.next.previous = node.previous
        node.previous = node.next = None
        self._size -= 1
        return node.value

    def pop_front(self) -> T:
        """Remove and return the first element; IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty deque")
        return self._unlink(self._head)

    def pop_back(self) -> T:
        """Remove and return the last element; IndexError when empty."""
        if self._tail is None:
            raise IndexError("pop from an empty deque")
        return self._unlink(self._tail)

    def front(self) -> T:
        """Return the first element; IndexError when empty."""
        if self._head is None:
            raise IndexError("front of an empty deque")
        return self._head.value

    def back(self) -> T:
        """Return the last element; IndexError when empty."""
        if self._tail is None:
            raise IndexError("back of an empty deque")
        return self._tail.value

    def _node_at(self, index: int) -> _Node:
        if not isinstance(index, int):
            raise TypeError(f"deque indices must be integers, not {type(index).__name__}")
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("deque index out of range")
        if index >= self._size // 2:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.previous
        else:
            node = self._head
            for _ in range(index):
                node = node.next
        return node

    def remove_at(self, index: int) -> T:
        """Remove and return the element at ``index``."""
        return self._unlink(self._node_at(index))

    def __getitem__(self, index: int) -> T:
        return self._node_at(index).value

    def __setitem__(self, index: int, value: T) -> None:
        self._node_at(index).value = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.previous

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"