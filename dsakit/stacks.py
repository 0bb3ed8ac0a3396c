"""Linked stack and queue, and stack reversal by bottom insertion."""

from collections.abc import Iterator, MutableSequence
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when an empty stack is read or popped."""


@dataclass
class _Link(Generic[T]):
    data: T
    next: "Optional[_Link[T]]" = None


class LinkedStack(Generic[T]):
    """A last-in first-out stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Link[T]] = None
        self._size = 0

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        self._top = _Link(item, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top item."""
        if self._top is None:
            raise EmptyStackError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self._top is None:
            raise EmptyStackError("stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return self._top is None

    def render(self) -> str:
        """Return the items from top to bottom joined by arrows."""
        if self._top is None:
            raise EmptyStackError("stack underflow")
        return " -> ".join(str(item) for item in self)

    def __iter__(self) -> Iterator[T]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size


class LinkedQueue(Generic[T]):
    """A first-in first-out queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Link[T]] = None
        self._rear: Optional[_Link[T]] = None
        self._size = 0

    def enqueue(self, item: T) -> None:
        """Append ``item`` at the rear."""
        node = _Link(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Optional[T]:
        """Remove and return the front item, or return None when empty."""
        if self._front is None:
            return None
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def front(self) -> Optional[T]:
        """Return the front item, or None when empty."""
        return None if self._front is None else self._front.data

    def rear(self) -> Optional[T]:
        """Return the rear item, or None when empty."""
        return None if self._rear is None else self._rear.data

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size


def insert_at_bottom(stack: MutableSequence[T], item: T) -> None:
    """Put ``item`` beneath every element of a list used as a stack (top at the end)."""
    stack.insert(0, item)


def reverse_stack(stack: MutableSequence[T]) -> None:
    """Reverse a list used as a stack in place by re-inserting items at the bottom."""
    popped = [stack.pop() for _ in range(len(stack))]
    for item in reversed(popped):
        insert_at_bottom(stack, item)