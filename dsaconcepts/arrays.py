"""Positional insertion, deletion and formatting of sequences."""

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def delete_element(items: Sequence[T], position: int) -> list[T]:
    """Return a copy of ``items`` without the element at ``position``.

    Raises IndexError when ``position`` is outside ``0 <= position < len(items)``.
    """
    values = list(items)
    if not 0 <= position < len(values):
        raise IndexError(f"Invalid position: {position}")
    del values[position]
    return values


def insert_element(items: Sequence[T], element: T, position: int) -> list[T]:
    """Return a copy of ``items`` with ``element`` placed at ``position``.

    ``position`` may equal ``len(items)`` to append. Raises IndexError
    for anything outside ``0 <= position <= len(items)``.
    """
    values = list(items)
    if not 0 <= position <= len(values):
        raise IndexError(f"Invalid position: {position}")
    values.insert(position, element)
    return values


def format_array(items: Iterable[object]) -> str:
    """Render every element followed by a single space."""
    return "".join(f"{item} " for item in items)