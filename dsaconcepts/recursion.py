"""Recursive classics: Fibonacci numbers and the Tower of Hanoi."""

from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n in (0, 1):
        return n
    return _fib(n - 1) + _fib(n - 2)


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _fib(n)


def fibonacci_terms(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [fib(index) for index in range(count)]


@dataclass(frozen=True)
class Move:
    """A single disk move between two rods."""

    disk: int
    from_rod: str
    to_rod: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.from_rod} to rod {self.to_rod}"


def tower_of_hanoi(n: int, from_rod: str, aux_rod: str, to_rod: str) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``from_rod`` to ``to_rod``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return
    yield from tower_of_hanoi(n - 1, from_rod, to_rod, aux_rod)
    yield Move(n, from_rod, to_rod)
    yield from tower_of_hanoi(n - 1, aux_rod, from_rod, to_rod)