"""A LIFO stack kept in a single FIFO queue."""

from __future__ import annotations

from collections import deque


class QueueStack:
    """A stack whose only storage is a queue, rotated on every push."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._queue.append(x)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._queue