"""Ranking of people by urgency: the largest value is seen first."""

from __future__ import annotations

from collections.abc import Sequence


def emergency_order(people: Sequence[int]) -> list[int]:
    """Return, for each position, its 1-based rank by descending value.

    Equal values keep their original relative order.
    """
    by_urgency = sorted(range(len(people)), key=lambda idx: people[idx], reverse=True)
    answer = [0] * len(people)
    for rank, idx in enumerate(by_urgency, start=1):
        answer[idx] = rank
    return answer