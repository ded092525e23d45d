"""An unbalanced binary search tree of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

EMPTY_MESSAGE = "Tree is empty"
FIELD_WIDTH = 3


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree; equal values go to the right of an existing one."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value``; smaller values go left, the rest go right."""
        new_node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def _search(self, value: int) -> tuple[_Node | None, _Node | None]:
        parent: _Node | None = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        return node, parent

    def _relink(self, parent: _Node | None, old: _Node, new: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def delete(self, value: int) -> bool:
        """Remove one occurrence of ``value``; return whether it was found.

        A node with two children takes the largest value of its left subtree.
        """
        node, parent = self._search(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            place = node.left
            if place.right is None:
                node.value = place.value
                node.left = place.left
            else:
                walker = place
                while place.right is not None:
                    walker = place
                    place = place.right
                node.value = place.value
                walker.right = place.left
        else:
            child = node.left if node.left is not None else node.right
            self._relink(parent, node, child)
        self._size -= 1
        return True

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        node, _ = self._search(value)
        return node is not None

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Iterator[int]:
        return self.in_order()

    def in_order(self) -> Iterator[int]:
        """Yield values left subtree first, then the node, then the right subtree."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def pre_order(self) -> Iterator[int]:
        """Yield each node before its left and then its right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[int]:
        """Yield each node after its left and then its right subtree."""
        if self._root is None:
            return
        stack = [self._root]
        reversed_order: list[int] = []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)

    def load(self, text: str) -> None:
        """Insert every whitespace-separated integer in ``text``.

        Raises ValueError on a token that is not an integer.
        """
        for token in text.split():
            try:
                value = int(token)
            except ValueError:
                raise ValueError(f"not an integer: {token!r}") from None
            self.insert(value)

    def render(self) -> str:
        """Return the values in order, each right-aligned in three columns.

        An empty tree renders as the empty-tree message followed by a newline.
        """
        if self._root is None:
            return EMPTY_MESSAGE + "\n"
        return "".join(f"{value:>{FIELD_WIDTH}}" for value in self.in_order())