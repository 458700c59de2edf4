"""Binary trees and their vertical-order traversal."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def vertical_traversal(root: TreeNode | None) -> list[list[Any]]:
    """Group node values by column, left to right; within a column by depth, ties sorted."""
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[Any]]] = defaultdict(lambda: defaultdict(list))
    queue = deque([(root, 0, 0)])
    while queue:
        node, level, column = queue.popleft()
        columns[column][level].append(node.val)
        if node.left is not None:
            queue.append((node.left, level + 1, column - 1))
        if node.right is not None:
            queue.append((node.right, level + 1, column + 1))
    return [
        [value for level in sorted(rows) for value in sorted(rows[level])]
        for _, rows in sorted(columns.items())
    ]