"""Exception classes for linkeddeque."""


class LinkedDequeError(Exception):
    """Base exception for all linkeddeque errors."""


class DequeIndexError(LinkedDequeError, IndexError):
    """Raised when an index falls outside [0, length) for at/insert_at/remove_at."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} is out of bounds for deque of length {length}")
        self.index = index
        self.length = length
