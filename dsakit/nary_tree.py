"""Trees with any number of children per node."""

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(eq=False)
class TreeNode:
    """A node holding a value and an ordered list of children."""

    data: int
    children: list["TreeNode"] = field(default_factory=list)


def _breadth_first(root: TreeNode) -> Iterator[TreeNode]:
    pending = deque([root])
    while pending:
        node = pending.popleft()
        yield node
        pending.extend(node.children)


def max_data_node(root: Optional[TreeNode]) -> TreeNode:
    """Return the node with the largest value, the first in level order on ties."""
    if root is None:
        raise ValueError("tree is empty")
    best = root
    for node in _breadth_first(root):
        if node.data > best.data:
            best = node
    return best


def build_level_wise(tokens: Iterable[Union[int, str]]) -> TreeNode:
    """Build a tree from level-order tokens.

    The first token is the root's value; then, for each node in level order,
    a child count followed by that many child values.
    """
    stream = iter(tokens)

    def take() -> int:
        try:
            return int(next(stream))
        except StopIteration:
            raise ValueError("input ended before the tree was complete") from None

    root = TreeNode(take())
    pending = deque([root])
    while pending:
        node = pending.popleft()
        count = take()
        if count < 0:
            raise ValueError("child count cannot be negative")
        for _ in range(count):
            child = TreeNode(take())
            node.children.append(child)
            pending.append(child)
    return root