"""Linear and binary search, plus a lookup of nicknames by user id."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(items: Iterable[Any], target: Any) -> bool:
    """Return whether ``target`` occurs in ``items``, scanning front to back."""
    return any(item == target for item in items)


def binary_search(items: Sequence[Any], target: Any) -> bool:
    """Return whether ``target`` occurs in the ascending sequence ``items``."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = items[mid]
        if value == target:
            return True
        if value > target:
            right = mid - 1
        else:
            left = mid + 1
    return False


def _search_range(items: Sequence[Any], target: Any, left: int, right: int) -> bool:
    if left > right:
        return False
    mid = left + (right - left) // 2
    value = items[mid]
    if value == target:
        return True
    if value > target:
        return _search_range(items, target, left, mid - 1)
    return _search_range(items, target, mid + 1, right)


def binary_search_recursive(items: Sequence[Any], target: Any) -> bool:
    """Recursive binary search over the ascending sequence ``items``."""
    return _search_range(items, target, 0, len(items) - 1)


def find_nickname(users: Iterable[tuple[int, str]], user_id: int) -> str | None:
    """Return the nickname paired with ``user_id``, or None if there is none."""
    return next((name for uid, name in users if uid == user_id), None)