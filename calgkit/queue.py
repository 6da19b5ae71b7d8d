"""Double-ended queue of arbitrary values."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class Queue:
    """A queue to which values can be added and removed at either end.

    The head is the front of the queue and the tail is the back.
    Popping or peeking at an empty queue raises IndexError.
    """

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push_head(self, data: Any) -> None:
        """Add a value at the head of the queue."""
        self._items.appendleft(data)

    def pop_head(self) -> Any:
        """Remove and return the value at the head of the queue."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def peek_head(self) -> Any:
        """Return the value at the head of the queue without removing it."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def push_tail(self, data: Any) -> None:
        """Add a value at the tail of the queue."""
        self._items.append(data)

    def pop_tail(self) -> Any:
        """Remove and return the value at the tail of the queue."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.pop()

    def peek_tail(self) -> Any:
        """Return the value at the tail of the queue without removing it."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._items

    def clear(self) -> None:
        """Remove every value from the queue."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values from head to tail."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"