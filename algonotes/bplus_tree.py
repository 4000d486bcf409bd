"""A small in-memory B+ tree of keys with order-bounded nodes."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort_left
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

ORDER = 3


@dataclass(eq=False)
class _Node:
    is_leaf: bool = True
    keys: list[Any] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)
    next_leaf: _Node | None = None


class BPlusTree:
    """B+ tree whose nodes split once they hold more than ``order`` keys."""

    def __init__(self, order: int = ORDER) -> None:
        if order < 1:
            raise ValueError("order must be at least 1")
        self.order = order
        self._root: _Node | None = None

    def insert(self, key: Any) -> None:
        """Insert ``key``; duplicates are kept."""
        if self._root is None:
            self._root = _Node(keys=[key])
            return
        split = self._insert(self._root, key)
        if split is not None:
            median, sibling = split
            self._root = _Node(
                is_leaf=False, keys=[median], children=[self._root, sibling]
            )

    def _insert(self, node: _Node, key: Any) -> tuple[Any, _Node] | None:
        if node.is_leaf:
            insort_left(node.keys, key)
            if len(node.keys) <= self.order:
                return None
            half = len(node.keys) // 2
            sibling = _Node(keys=node.keys[half:], next_leaf=node.next_leaf)
            del node.keys[half:]
            node.next_leaf = sibling
            return sibling.keys[0], sibling

        index = bisect_right(node.keys, key)
        split = self._insert(node.children[index], key)
        if split is None:
            return None
        median, child = split
        node.keys.insert(index, median)
        node.children.insert(index + 1, child)
        if len(node.keys) <= self.order:
            return None
        mid = len(node.keys) // 2
        median = node.keys[mid]
        sibling = _Node(
            is_leaf=False,
            keys=node.keys[mid + 1 :],
            children=node.children[mid + 1 :],
        )
        del node.keys[mid:]
        del node.children[mid + 1 :]
        return median, sibling

    def search(self, key: Any) -> bool:
        """Tell whether ``key`` is stored in the tree."""
        node = self._root
        if node is None:
            return False
        while not node.is_leaf:
            node = node.children[bisect_right(node.keys, key)]
        index = bisect_left(node.keys, key)
        return index < len(node.keys) and node.keys[index] == key

    __contains__ = search

    def preorder_keys(self) -> list[Any]:
        """Keys node by node in pre-order: a node's keys, then each child's."""
        return list(self._preorder(self._root))

    def _preorder(self, node: _Node | None) -> Iterator[Any]:
        if node is None:
            return
        yield from node.keys
        for child in node.children:
            yield from self._preorder(child)

    def __iter__(self) -> Iterator[Any]:
        """Yield the stored keys in ascending order along the leaf chain."""
        node = self._root
        if node is None:
            return
        while not node.is_leaf:
            node = node.children[0]
        leaf: _Node | None = node
        while leaf is not None:
            yield from leaf.keys
            leaf = leaf.next_leaf