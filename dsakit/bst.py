"""Binary search trees: insertion, levels, height and a root balance check."""

from collections import deque
from typing import Optional

from dsakit.binary_tree import Node


def bst_insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` and return the root; equal values go to the left."""
    if root is None:
        return Node(value)
    if value <= root.data:
        root.left = bst_insert(root.left, value)
    else:
        root.right = bst_insert(root.right, value)
    return root


def levels(root: Optional[Node]) -> list[list[int]]:
    """Return the values level by level, each level left to right."""
    if root is None:
        return []
    result: list[list[int]] = []
    current = deque([root])
    while current:
        row: list[int] = []
        for _ in range(len(current)):
            node = current.popleft()
            row.append(node.data)
            if node.left is not None:
                current.append(node.left)
            if node.right is not None:
                current.append(node.right)
        result.append(row)
    return result


def height(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def is_balanced_at_root(root: Optional[Node]) -> bool:
    """Tell whether the root's subtrees differ in height by at most one.

    Only the root is checked; deeper nodes may be unbalanced.
    """
    if root is None:
        return True
    return abs(height(root.left) - height(root.right)) <= 1