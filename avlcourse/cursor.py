"""A stateful cursor that walks an AVLTree in ascending key order."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from avlcourse.avl import AVLTree, _Node


class AVLCursor:
    """Walks an AVLTree with an explicit traversal stack.

    The cursor is positioned on the tree's first entry when created.
    Positioning methods return the ``(key, item)`` pair now under the cursor,
    or ``None`` when the tree is empty or the walk has ended.

    ``find`` records only the nodes on the search path, so stepping on
    from a found entry follows that path rather than a full in-order walk.
    """

    def __init__(self, tree: AVLTree) -> None:
        self._tree = tree
        self._stack: list[_Node] = []
        self._current: _Node | None = None
        self.first()

    def copy(self) -> AVLCursor:
        """Return a new cursor on the same tree at the same position."""
        clone = AVLCursor.__new__(AVLCursor)
        clone._tree = self._tree
        clone._stack = list(self._stack)
        clone._current = self._current
        return clone

    def _pair(self) -> tuple[Any, Any] | None:
        node = self._current
        return None if node is None else (node.key, node.item)

    def _finish(self) -> None:
        self._current = None
        return None

    def current(self) -> tuple[Any, Any] | None:
        """Return the entry under the cursor without moving it."""
        return self._pair()

    def first(self) -> tuple[Any, Any] | None:
        """Move to the entry with the smallest key."""
        self._stack = []
        node = self._tree._root
        if node is None:
            return self._finish()
        while node.left is not None:
            self._stack.append(node)
            node = node.left
        self._current = node
        return self._pair()

    def next(self) -> tuple[Any, Any] | None:
        """Advance to the following entry."""
        if self._current is None:
            return None
        node = self._current.right
        while node is not None:
            self._stack.append(node)
            node = node.left
        if not self._stack:
            return self._finish()
        candidate = self._stack.pop()
        if self._current is candidate.right:
            if not self._stack:
                return self._finish()
            self._current = self._stack.pop()
        else:
            self._current = candidate
        return self._pair()

    def find(self, key: Any) -> tuple[Any, Any] | None:
        """Move to the entry with ``key``; return ``None`` if it is absent."""
        self._stack = []
        node = self._tree._root
        while node is not None:
            if node.key == key:
                self._current = node
                return self._pair()
            child = node.left if node.key > key else node.right
            if child is None:
                break
            self._stack.append(node)
            node = child
        self._stack = []
        return self._finish()

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        pair = self.first()
        while pair is not None:
            yield pair
            pair = self.next()