"""linkeddeque - Double-ended queue on a doubly-linked list with O(1) end operations."""

import logging

from linkeddeque.core import Deque
from linkeddeque.errors import DequeIndexError, LinkedDequeError

__version__ = "0.0.1"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Deque",
    "LinkedDequeError",
    "DequeIndexError",
]
