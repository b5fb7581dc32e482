"""Type definitions for linkeddeque."""

from typing import TypeVar

# Element type stored in a Deque
T = TypeVar("T")
