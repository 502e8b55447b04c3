import random

import pytest

from algoplay.sorting import (
    bubble_sort,
    insertion_sort,
    quick_sort,
    selection_sort,
    sorted_copy,
)

SAMPLES = [
    [4, 3, 6, 5, 8, 10, 9, 7, 1, 2],
    [2, 6, 3, 9, 8],
    [9, 7, 4, 6],
    [5, 4, 3, 2, 1],
    [1, 3, 7, 5, 4, 8],
    [],
    [42],
    [3, 3, 3],
    [1, 2, 3, 4, 5],
    [2, 1, 2, 1, 2, 1],
    [-5, 0, -1, 7, -5],
]


def _all_results(data):
    """Run every sort on its own copy of the input."""
    return [
        sorted_copy(list(data)),
        bubble_sort(list(data)),
        selection_sort(list(data)),
        insertion_sort(list(data)),
        quick_sort(list(data)),
    ]


@pytest.mark.parametrize("sample", SAMPLES)
def test_matches_builtin(sample):
    expected = sorted(sample)
    assert sorted_copy(sample) == expected
    assert bubble_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert quick_sort(sample) == expected


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ([4, 3, 6, 5, 8, 10, 9, 7, 1, 2], [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]),
        ([2, 6, 3, 9, 8], [2, 3, 6, 8, 9]),
        ([9, 7, 4, 6], [4, 6, 7, 9]),
        ([5, 4, 3, 2, 1], [1, 2, 3, 4, 5]),
        ([1, 3, 7, 5, 4, 8], [1, 3, 4, 5, 7, 8]),
    ],
)
def test_source_examples(data, expected):
    for result in _all_results(data):
        assert result == expected


def test_input_is_not_mutated():
    data = [4, 3, 6, 5, 8, 10, 9, 7, 1, 2]
    original = list(data)
    results = [
        sorted_copy(data),
        bubble_sort(data),
        selection_sort(data),
        insertion_sort(data),
        quick_sort(data),
    ]
    assert data == original
    for result in results:
        assert result is not data
        assert result == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_random_lists():
    rng = random.Random(1234)
    for _ in range(50):
        sample = [rng.randint(-20, 20) for _ in range(rng.randint(0, 30))]
        expected = sorted(sample)
        for result in _all_results(sample):
            assert result == expected
            assert all(a <= b for a, b in zip(result, result[1:]))


def test_accepts_any_iterable():
    expected = [1, 2, 3, 4, 5]
    assert sorted_copy(iter((5, 4, 3, 2, 1))) == expected
    assert bubble_sort(iter((5, 4, 3, 2, 1))) == expected
    assert selection_sort(iter((5, 4, 3, 2, 1))) == expected
    assert insertion_sort(iter((5, 4, 3, 2, 1))) == expected
    assert quick_sort(iter((5, 4, 3, 2, 1))) == expected


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert sorted_copy(words) == expected
    assert bubble_sort(words) == expected
    assert selection_sort(words) == expected
    assert insertion_sort(words) == expected
    assert quick_sort(words) == expected