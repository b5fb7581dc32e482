"""Doubly-linked node chain backing Deque."""

from collections.abc import Iterator
from typing import Generic

from linkeddeque.types import T


class Node(Generic[T]):
    """A node in the doubly-linked chain."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T | None = None) -> None:
        self.value = value
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None


def link_before(node: Node[T], new: Node[T]) -> None:
    """Splice new immediately before an interior node. O(1)."""
    prev = node.prev
    if prev is None:
        raise ValueError("link_before requires a node with a predecessor")
    prev.next = new
    new.prev = prev
    new.next = node
    node.prev = new


def unlink(node: Node[T]) -> None:
    """Splice an interior node out of its chain. O(1)."""
    prev = node.prev
    nxt = node.next
    if prev is None or nxt is None:
        raise ValueError("unlink requires a node with both neighbours")
    prev.next = nxt
    nxt.prev = prev
    node.prev = None
    node.next = None


def walk_to(head: Node[T], tail: Node[T], length: int, index: int) -> Node[T]:
    """
    Return the node at index, scanning from whichever end is closer.

    Indices past the midpoint are reached backward from tail, all others
    forward from head, so at most length // 2 links are followed. The caller
    is responsible for checking 0 <= index < length.
    """
    if index > length // 2:
        current = tail
        for _ in range(length - 1 - index):
            current = current.prev  # type: ignore[assignment]
    else:
        current = head
        for _ in range(index):
            current = current.next  # type: ignore[assignment]
    return current


def iter_values(head: Node[T] | None) -> Iterator[T]:
    """Yield values following next links from head."""
    current = head
    while current is not None:
        yield current.value  # type: ignore[misc]
        current = current.next


def iter_values_reversed(tail: Node[T] | None) -> Iterator[T]:
    """Yield values following prev links from tail."""
    current = tail
    while current is not None:
        yield current.value  # type: ignore[misc]
        current = current.prev
