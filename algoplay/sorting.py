"""Classic comparison sorts, each returning a new ascending list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def sorted_copy(nums: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using the built-in sort."""
    return sorted(nums)


def bubble_sort(nums: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order neighbours."""
    data = list(nums)
    n = len(data)
    for cycle in range(n - 1):
        for j in range(n - cycle - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
    return data


def selection_sort(nums: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining value to the front each cycle."""
    data = list(nums)
    n = len(data)
    for i in range(n - 1):
        min_idx = min(range(i, n), key=data.__getitem__)
        if min_idx != i:
            data[i], data[min_idx] = data[min_idx], data[i]
    return data


def insertion_sort(nums: Iterable[Any]) -> list[Any]:
    """Sort by inserting each value into the already sorted prefix."""
    data = list(nums)
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
    return data


def _quick_sort_range(data: list[Any], start: int, end: int) -> None:
    if start >= end:
        return

    pivot = data[start]
    i = start + 1
    j = end
    while i <= j:
        while i <= end and data[i] <= pivot:
            i += 1
        while j > start and data[j] >= pivot:
            j -= 1
        if i > j:
            data[j], data[start] = data[start], data[j]
        else:
            data[i], data[j] = data[j], data[i]

    _quick_sort_range(data, start, j - 1)
    _quick_sort_range(data, j + 1, end)


def quick_sort(nums: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element and recursing on each side."""
    data = list(nums)
    _quick_sort_range(data, 0, len(data) - 1)
    return data