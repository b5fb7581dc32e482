"""Main Deque implementation."""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Generic

from linkeddeque.errors import DequeIndexError
from linkeddeque.linkedlist import (
    Node,
    iter_values,
    iter_values_reversed,
    link_before,
    unlink,
    walk_to,
)
from linkeddeque.types import T

logger = logging.getLogger(__name__)

# Rendering used by __str__
_LINK_SYMBOL = " -> "
_END_SYMBOL = "null"


class Deque(Generic[T]):
    """
    Double-ended queue built on a doubly-linked list.

    End operations are O(1). Indexed operations walk the chain from whichever
    end is closer to the target, so they cost at most length // 2 steps.

    An empty deque keeps a single sentinel node as both head and tail; its
    value slot is reused by the first push and cleared again when the last
    element is removed.
    """

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        """
        Initialize the deque.

        Args:
            iterable: Optional elements to append in iteration order.
        """
        self._head: Node[T] = Node()
        self._tail: Node[T] = self._head
        self._length = 0
        # Bumped by every structural change; checked by live iterators
        self._mutations = 0

        if iterable is not None:
            for element in iterable:
                self.push(element)

    @property
    def length(self) -> int:
        """Number of elements in the deque. O(1)."""
        return self._length

    def push(self, value: T) -> None:
        """Add an element to the back (right side) of the deque. O(1)."""
        self._mutations += 1
        if self._length == 0:
            self._tail.value = value
            self._length += 1
            return

        node = Node(value)
        node.prev = self._tail
        self._tail.next = node
        self._tail = node
        self._length += 1

    def push_left(self, value: T) -> None:
        """Add an element to the front (left side) of the deque. O(1)."""
        self._mutations += 1
        if self._length == 0:
            self._head.value = value
            self._length += 1
            return

        node = Node(value)
        node.next = self._head
        self._head.prev = node
        self._head = node
        self._length += 1

    def pop(self) -> T | None:
        """
        Remove and return the last element.

        Returns:
            The element at the back of the deque, or None if it is empty.
        """
        if self._length == 0:
            return None
        if self._length == 1:
            return self._clear_last()

        self._mutations += 1
        node = self._tail
        self._tail = node.prev  # type: ignore[assignment]
        self._tail.next = None
        node.prev = None
        self._length -= 1
        return node.value

    def popleft(self) -> T | None:
        """
        Remove and return the first element.

        Returns:
            The element at the front of the deque, or None if it is empty.
        """
        if self._length == 0:
            return None
        if self._length == 1:
            return self._clear_last()

        self._mutations += 1
        node = self._head
        self._head = node.next  # type: ignore[assignment]
        self._head.prev = None
        node.next = None
        self._length -= 1
        return node.value

    def _clear_last(self) -> T | None:
        """Empty a single-element deque, keeping its node as the sentinel."""
        value = self._head.value
        self._head.value = None
        self._mutations += 1
        self._length = 0
        return value

    def get_head(self) -> T | None:
        """Return the first element without removing it, or None if empty."""
        return self._head.value

    def get_tail(self) -> T | None:
        """Return the last element without removing it, or None if empty."""
        return self._tail.value

    def at(self, index: int) -> T:
        """
        Return the element at a zero-based index.

        Raises:
            DequeIndexError: If index is not in [0, length)
        """
        self._check_index(index)
        return walk_to(self._head, self._tail, self._length, index).value  # type: ignore[return-value]

    def insert_at(self, value: T, index: int) -> bool:
        """
        Insert an element so that it ends up at index.

        Elements from index onward shift back by one. Index 0 is a push_left;
        appending past the last element is push, not insert_at.

        Args:
            value: The element to insert
            index: Zero-based position in [0, length)

        Returns:
            True once the element is inserted.

        Raises:
            DequeIndexError: If index is not in [0, length)
        """
        self._check_index(index)
        if index == 0:
            self.push_left(value)
            return True

        current = walk_to(self._head, self._tail, self._length, index)
        link_before(current, Node(value))
        self._mutations += 1
        self._length += 1
        return True

    def remove_at(self, index: int) -> T | None:
        """
        Remove and return the element at index.

        Raises:
            DequeIndexError: If index is not in [0, length)
        """
        self._check_index(index)
        if index == 0:
            return self.popleft()
        if index == self._length - 1:
            return self.pop()

        current = walk_to(self._head, self._tail, self._length, index)
        unlink(current)
        self._mutations += 1
        self._length -= 1
        return current.value

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._length:
            logger.debug("Rejected index %d for deque of length %d", index, self._length)
            raise DequeIndexError(index, self._length)

    def reverse(self) -> None:
        """Reverse the order of elements in place. O(n)."""
        if self._length < 2:
            return

        self._mutations += 1
        self._head, self._tail = self._tail, self._head
        current: Node[T] | None = self._head
        while current is not None:
            current.prev, current.next = current.next, current.prev
            current = current.next
        logger.debug("Reversed deque of length %d", self._length)

    def _optimize_steps(self, steps: int) -> int:
        """Reduce steps to the equivalent rotation with the fewest moves."""
        steps %= self._length
        if steps > self._length // 2:
            steps -= self._length
        return steps

    def rotate(self, steps: int = 1) -> None:
        """
        Rotate the deque to the right by steps, or to the left if negative.

        Rotating by any multiple of length, or rotating an empty deque, does
        nothing. At most length // 2 elements are moved.
        """
        if steps == 0 or self._length == 0:
            return

        steps = self._optimize_steps(steps)
        logger.debug("Rotating deque of length %d by %d", self._length, steps)

        if steps > 0:
            for _ in range(steps):
                self.push_left(self.pop())  # type: ignore[arg-type]
        else:
            for _ in range(-steps):
                self.push(self.popleft())  # type: ignore[arg-type]

    def copy(self) -> "Deque[T]":
        """Return a shallow copy with freshly allocated nodes."""
        return Deque(self)

    def __copy__(self) -> "Deque[T]":
        return self.copy()

    def clear(self) -> None:
        """Remove all elements, returning to the sentinel state. O(1)."""
        self._head.value = None
        self._head.prev = None
        self._head.next = None
        self._mutations += 1
        self._tail = self._head
        self._length = 0
        logger.debug("Cleared deque")

    def contains(self, value: object) -> bool:
        """Return True if any element compares equal to value."""
        return self.find(value) is not None

    def find(self, value: object) -> int | None:
        """
        Return the index of the first element equal to value.

        Returns:
            The zero-based index, or None if no element matches.
        """
        for index, element in enumerate(self):
            if element == value:
                return index
        return None

    def to_list(self) -> list[T]:
        """Return all elements head to tail as a new list."""
        return list(self)

    def __len__(self) -> int:
        """Return the number of elements in the deque."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if the deque is non-empty."""
        return self._length > 0

    def __iter__(self) -> Iterator[T]:
        """
        Iterate over the elements, head to tail.

        Each call returns an independent generator. The deque is read when
        iteration starts, so emptying it before the first next() yields
        nothing.

        Raises:
            RuntimeError: If the deque is mutated while iteration is underway
        """
        yield from self._guarded(iter_values, self._head)

    def __reversed__(self) -> Iterator[T]:
        """Iterate over the elements, tail to head. Same rules as __iter__."""
        yield from self._guarded(iter_values_reversed, self._tail)

    def _guarded(
        self, walk: Callable[[Node[T]], Iterator[T]], start: Node[T]
    ) -> Iterator[T]:
        mutations = self._mutations
        if self._length == 0:
            return
        for value in walk(start):
            yield value
            # Checked before the walk follows its next link
            if self._mutations != mutations:
                raise RuntimeError("deque mutated during iteration")

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        if self._length != other._length:
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """
        Render as "( v1 ) -> ( v2 ) -> null"; an empty deque is "null".

        Values are formatted with str(), so a stored None shows as "( None )".
        """
        if self._length == 0:
            return _END_SYMBOL
        segments = [f"( {value} )" for value in self]
        segments.append(_END_SYMBOL)
        return _LINK_SYMBOL.join(segments)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
