"""Binary and linear search returning an index, or -1 when absent."""

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the ascending ``items``, or -1."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def linear_search(items: Iterable[Any], key: Any) -> int:
    """Return the index of the first element equal to ``key``, or -1."""
    for index, item in enumerate(items):
        if item == key:
            return index
    return -1