"""Shared fixtures for linkeddeque tests."""

from collections.abc import Callable

import pytest

from linkeddeque import Deque


def _assert_chain(deque: Deque[object]) -> None:
    head = deque._head
    tail = deque._tail
    length = len(deque)

    assert length >= 0
    if length == 0:
        assert head is tail
        assert head.value is None
        assert head.prev is None
        assert head.next is None
        return
    if length == 1:
        assert head is tail
        assert head.prev is None
        assert head.next is None
        return

    assert head.prev is None
    assert tail.next is None

    forward = []
    node = head
    while node is not None:
        forward.append(node)
        node = node.next
    assert len(forward) == length
    assert forward[-1] is tail

    backward = []
    node = tail
    while node is not None:
        backward.append(node)
        node = node.prev
    assert backward == forward[::-1]


@pytest.fixture
def check_invariants() -> Callable[[Deque[object]], None]:
    """Return a callable asserting the head/tail/length invariants of a deque."""
    return _assert_chain
