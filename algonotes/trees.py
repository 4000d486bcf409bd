"""Binary tree nodes and vertical-order traversal."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: Any = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def vertical_traversal(root: TreeNode | None) -> list[list[Any]]:
    """Columns left to right; within one, top to bottom, ties at one spot sorted by value."""
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[Any]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue = deque([(root, 0, 0)])
    while queue:
        node, row, col = queue.popleft()
        if node.left is not None:
            queue.append((node.left, row + 1, col - 1))
        if node.right is not None:
            queue.append((node.right, row + 1, col + 1))
        columns[col][row].append(node.val)
    return [
        [value for row in sorted(rows) for value in sorted(rows[row])]
        for _, rows in sorted(columns.items())
    ]