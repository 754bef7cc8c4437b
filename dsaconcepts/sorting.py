"""Selection, bubble and insertion sort, each returning a new ascending list."""

from collections.abc import Iterable
from typing import Any


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining element into place."""
    values = list(items)
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    values = list(items)
    n = len(values)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
    return values


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    values = list(items)
    for step in range(1, len(values)):
        key = values[step]
        j = step - 1
        while j >= 0 and key < values[j]:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
    return values