"""Three fixed-capacity queue designs."""

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when an item is added to a queue with no free slot."""


class QueueEmptyError(Exception):
    """Raised when an item is taken from an empty queue."""


class CircularQueue:
    """Ring buffer of ``size`` slots; one slot stays free, so it holds ``size - 1`` items."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear; raise QueueFullError when no slot is free."""
        if self._front == (self._rear + 1) % self._size:
            raise QueueFullError("Queue is full")
        self._slots[self._rear] = item
        self._rear = (self._rear + 1) % self._size

    def dequeue(self) -> Any:
        """Remove and return the front item; raise QueueEmptyError when empty."""
        if self._front == self._rear:
            self._front = self._rear = 0
            raise QueueEmptyError("Queue is empty")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self._size
        return item

    def __len__(self) -> int:
        return (self._rear - self._front) % self._size

    def __iter__(self) -> Iterator[Any]:
        index = self._front
        while index != self._rear:
            yield self._slots[index]
            index = (index + 1) % self._size

    def display(self) -> str:
        """Render the items front to rear, or a note that the queue is empty."""
        if not len(self):
            return "Queue is empty"
        return "".join(f"{item}  " for item in self)


class LinearQueue:
    """Array queue whose rear never wraps: slots freed at the front are reused only once it empties."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._slots: list[Any] = [None] * size
        self._front = -1
        self._rear = -1

    def is_empty(self) -> bool:
        return self._front == -1 and self._rear == -1

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear; raise QueueFullError when the rear is at the last slot."""
        if self._rear == self._size - 1:
            raise QueueFullError("Queue is full")
        if self._front == -1:
            self._front = 0
        self._rear += 1
        self._slots[self._rear] = item

    def dequeue(self) -> Any:
        """Remove and return the front item; raise QueueEmptyError when empty."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty")
        item = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front += 1
        return item

    def __len__(self) -> int:
        return 0 if self.is_empty() else self._rear - self._front + 1

    def __iter__(self) -> Iterator[Any]:
        if not self.is_empty():
            yield from self._slots[self._front:self._rear + 1]

    def display(self) -> str:
        """Render the items front to rear, or a note that the queue is empty."""
        if self.is_empty():
            return "Queue is empty"
        return "".join(f"{item} " for item in self)


class ShiftingQueue:
    """Bounded queue that moves every remaining item forward on removal."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear; raise QueueFullError at capacity."""
        if len(self._items) == self._capacity:
            raise QueueFullError("Queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise QueueEmptyError when empty."""
        if not self._items:
            raise QueueEmptyError("Queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError("Queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def display(self) -> str:
        """Render the items front to rear, or a note that the queue is empty."""
        if not self._items:
            return "Queue is empty"
        return "".join(f"{item} <- " for item in self._items)