"""AVL trees: self-balancing insertion by rotations, and deletion."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree that stores its own height."""

    data: int
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    height: int = 1


def height(node: Optional[AVLNode]) -> int:
    """Return the stored height of ``node``, 0 for no node."""
    return 0 if node is None else node.height


def balance_factor(node: Optional[AVLNode]) -> int:
    """Return left height minus right height, 0 for no node."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = max(height(node.left), height(node.right)) + 1


def left_rotate(node: AVLNode) -> AVLNode:
    """Rotate left around ``node`` and return the new subtree root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("cannot rotate left without a right child")
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def right_rotate(node: AVLNode) -> AVLNode:
    """Rotate right around ``node`` and return the new subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("cannot rotate right without a left child")
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def insert(root: Optional[AVLNode], value: int) -> AVLNode:
    """Insert ``value``, rebalance, and return the new root; duplicates are ignored."""
    if root is None:
        return AVLNode(value)
    if value < root.data:
        root.left = insert(root.left, value)
    elif value > root.data:
        root.right = insert(root.right, value)

    _update_height(root)
    balance = balance_factor(root)

    if balance > 1 and value < root.left.data:
        return right_rotate(root)
    if balance < -1 and value > root.right.data:
        return left_rotate(root)
    if balance > 1 and value > root.left.data:
        root.left = left_rotate(root.left)
        return right_rotate(root)
    if balance < -1 and value < root.right.data:
        root.right = right_rotate(root.right)
        return left_rotate(root)
    return root


def min_node(root: Optional[AVLNode]) -> Optional[AVLNode]:
    """Return the leftmost node of the subtree, or None when it is empty."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def delete(root: Optional[AVLNode], value: int) -> Optional[AVLNode]:
    """Remove ``value`` as in a plain search tree and return the new root.

    No rotations are made and stored heights are left as they were.
    """
    if root is None:
        return None
    if value < root.data:
        root.left = delete(root.left, value)
    elif value > root.data:
        root.right = delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_node(root.right)
        root.data = successor.data
        root.right = delete(root.right, successor.data)
    return root


def _inorder(node: Optional[AVLNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def inorder(root: Optional[AVLNode]) -> list[int]:
    """Return the values in ascending (left, root, right) order."""
    return list(_inorder(root))