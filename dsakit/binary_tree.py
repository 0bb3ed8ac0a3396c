"""Binary trees: level-order construction, traversals and structural checks."""

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

MISSING = -1


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _is_missing(value: Optional[int]) -> bool:
    return value is None or value == MISSING


def build_level_order(values: Sequence[Optional[int]]) -> Optional[Node]:
    """Build a tree from level-order values, where -1 or None marks no child.

    The first value always becomes the root.
    """
    if not values:
        return None
    stream = iter(values)
    root = Node(next(stream))
    pending = deque([root])
    for left_value in stream:
        if not pending:
            raise ValueError("values left over with no parent to attach to")
        current = pending.popleft()
        if not _is_missing(left_value):
            current.left = Node(left_value)
            pending.append(current.left)
        right_value = next(stream, None)
        if not _is_missing(right_value):
            current.right = Node(right_value)
            pending.append(current.right)
    return root


def is_same_tree(first: Optional[Node], second: Optional[Node]) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.data == second.data
        and is_same_tree(first.left, second.left)
        and is_same_tree(first.right, second.right)
    )


def insert_level_order(root: Optional[Node], value: int) -> Node:
    """Put ``value`` in the first free slot in level order and return the root.

    Nodes holding 0 are placeholders: no child is ever attached below them.
    """
    if root is None:
        return Node(value)
    pending = deque([root])
    while pending:
        current = pending.popleft()
        if current.left is None:
            current.left = Node(value)
            return root
        if current.left.data != 0:
            pending.append(current.left)
        if current.right is None:
            current.right = Node(value)
            return root
        if current.right.data != 0:
            pending.append(current.right)
    return root


def fix_tree(root: Optional[Node]) -> None:
    """Detach every placeholder child holding 0, in place."""
    if root is None:
        return
    pending = deque([root])
    while pending:
        current = pending.popleft()
        if current.left is not None:
            if current.left.data == 0:
                current.left = None
            else:
                pending.append(current.left)
        if current.right is not None:
            if current.right.data == 0:
                current.right = None
            else:
                pending.append(current.right)


def insert_array(root: Optional[Node], values: Iterable[int]) -> Optional[Node]:
    """Insert all values in level order, then drop the 0 placeholders."""
    for value in values:
        root = insert_level_order(root, value)
    fix_tree(root)
    return root


def insert_complete(root: Optional[Node], value: int) -> Node:
    """Attach ``value`` at the first free slot of a complete tree; return the root."""
    node = Node(value)
    if root is None:
        return node
    pending = deque([root])
    while pending:
        current = pending.popleft()
        if current.left is None:
            current.left = node
            return root
        if current.right is None:
            current.right = node
            return root
        pending.append(current.left)
        pending.append(current.right)
    return root


def _preorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def preorder(root: Optional[Node]) -> list[int]:
    """Return the values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, right, root order."""
    return list(_postorder(root))


def level_order(root: Optional[Node]) -> list[int]:
    """Return the values breadth first, left to right."""
    if root is None:
        return []
    result: list[int] = []
    pending = deque([root])
    while pending:
        current = pending.popleft()
        result.append(current.data)
        if current.left is not None:
            pending.append(current.left)
        if current.right is not None:
            pending.append(current.right)
    return result


def has_duplicate_values(root: Optional[Node]) -> bool:
    """Tell whether any value occurs in more than one node."""
    seen: set[int] = set()
    for value in _preorder(root):
        if value in seen:
            return True
        seen.add(value)
    return False