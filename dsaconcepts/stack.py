"""A fixed-capacity stack backed by a zero-filled slot array."""

from collections.abc import Iterator


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from or removing from an empty stack."""


class Stack:
    """Bounded stack of integers; free slots hold 0 and stay addressable by position."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._slots = [0] * capacity
        self._top = -1

    def is_empty(self) -> bool:
        return self._top == -1

    def is_full(self) -> bool:
        return self._top + 1 == self._capacity

    def push(self, item: int) -> None:
        """Place ``item`` on top; raise StackOverflowError when full."""
        if self.is_full():
            raise StackOverflowError("Stack overflow")
        self._top += 1
        self._slots[self._top] = item

    def pop(self) -> int:
        """Remove and return the top item; raise StackUnderflowError when empty."""
        if self.is_empty():
            raise StackUnderflowError("Stack underflow")
        item = self._slots[self._top]
        self._slots[self._top] = 0
        self._top -= 1
        return item

    def __len__(self) -> int:
        return self._top + 1

    def _check_position(self, position: int) -> None:
        if self.is_empty():
            raise StackUnderflowError("Stack underflow")
        if not 0 <= position < self._capacity:
            raise IndexError(f"position {position} outside capacity {self._capacity}")

    def peek(self, position: int) -> int:
        """Return the value stored in slot ``position`` (0 is the bottom)."""
        self._check_position(position)
        return self._slots[position]

    def change(self, position: int, value: int) -> None:
        """Overwrite the value stored in slot ``position``."""
        self._check_position(position)
        self._slots[position] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots[:self._top + 1])

    def display(self) -> str:
        """Render the items bottom to top, one per line."""
        if self.is_empty():
            raise StackUnderflowError("Stack underflow")
        return "\n".join(str(item) for item in self)