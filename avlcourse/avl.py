"""A self-balancing binary search tree mapping ordered keys to items."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

_MISSING = object()


class _Node:
    """A tree node; a freshly created node reports a depth of zero."""

    __slots__ = ("key", "item", "depth", "balance", "left", "right")

    def __init__(self, key: Any, item: Any) -> None:
        self.key = key
        self.item = item
        self.depth = 0
        self.balance = 0
        self.left: _Node | None = None
        self.right: _Node | None = None


def _compute_balance(node: _Node | None) -> None:
    if node is None:
        return
    left_depth = node.left.depth if node.left else 0
    right_depth = node.right.depth if node.right else 0
    node.depth = 1 + max(left_depth, right_depth)
    node.balance = right_depth - left_depth


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _compute_balance(pivot.left)
    _compute_balance(pivot.right)
    _compute_balance(pivot)
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _compute_balance(pivot.left)
    _compute_balance(pivot.right)
    _compute_balance(pivot)
    return pivot


def _balance_right(node: _Node) -> _Node:
    if node.right:
        if node.right.balance > 0:
            node = _rotate_left(node)
        elif node.right.balance < 0:
            node.right = _rotate_right(node.right)
            node = _rotate_left(node)
    return node


def _balance_left(node: _Node) -> _Node:
    if node.left:
        if node.left.balance < 0:
            node = _rotate_right(node)
        elif node.left.balance > 0:
            node.left = _rotate_left(node.left)
            node = _rotate_right(node)
    return node


def _balance(node: _Node) -> _Node:
    if node.balance > 1:
        node = _balance_right(node)
    if node.balance < -1:
        node = _balance_left(node)
    return node


def _rebalance(node: _Node) -> _Node:
    _compute_balance(node)
    return _balance(node)


class AVLTree:
    """An ordered map kept balanced by rotations.

    Inserting a key that is already present leaves the stored item unchanged;
    removing a key that is absent does nothing.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: Any, item: Any) -> None:
        """Add ``key`` with ``item`` unless the key is already present."""
        if self._root is None:
            self._root = _Node(key, item)
            self._size = 1
            return
        self._root, added = self._insert(key, item, self._root)
        if added:
            self._size += 1

    def _insert(self, key: Any, item: Any, node: _Node) -> tuple[_Node, bool]:
        added = False
        if key < node.key:
            if node.left:
                node.left, added = self._insert(key, item, node.left)
            else:
                node.left = _Node(key, item)
                added = True
        elif key > node.key:
            if node.right:
                node.right, added = self._insert(key, item, node.right)
            else:
                node.right = _Node(key, item)
                added = True
        return _rebalance(node), added

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present."""
        self._root, removed = self._remove(self._root, key)
        if removed:
            self._size -= 1

    def _remove(self, node: _Node | None, key: Any) -> tuple[_Node | None, bool]:
        if node is None:
            return None, False
        if node.key > key:
            node.left, removed = self._remove(node.left, key)
            if removed:
                _compute_balance(node)
                node = _balance_right(node)
            return node, removed
        if node.key < key:
            node.right, removed = self._remove(node.right, key)
            if removed:
                _compute_balance(node)
                node = _balance_left(node)
            return node, removed
        if node.right is None:
            return node.left, True
        if node.left is None:
            return node.right, True
        return self._remove_both_children(node), True

    @staticmethod
    def _remove_both_children(node: _Node) -> _Node:
        """Replace ``node``'s entry with its in-order predecessor."""
        parent: _Node | None = None
        predecessor = node.left
        levels = 0
        while predecessor.right is not None:
            parent = predecessor
            predecessor = predecessor.right
            levels += 1
        node.key = predecessor.key
        node.item = predecessor.item
        if parent is None:
            node.left = predecessor.left
        else:
            parent.right = predecessor.left
        # Each unwinding step rebalances the subtree at the removed position,
        # followed by one more pass once the removal itself completes.
        for _ in range(levels + 1):
            node = _rebalance(node)
        return node

    def _find_node(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if node.key == key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def find(self, key: Any) -> Any:
        """Return the item stored under ``key``; raise KeyError if absent."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.item

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the item stored under ``key``, or ``default``."""
        node = self._find_node(key)
        return default if node is None else node.item

    def depth(self) -> int:
        """Return the recorded depth of the root, zero for an empty tree."""
        return self._root.depth if self._root else 0

    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def __getitem__(self, key: Any) -> Any:
        return self.find(key)

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._nodes())

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, item)`` pairs in ascending key order."""
        return ((node.key, node.item) for node in self._nodes())