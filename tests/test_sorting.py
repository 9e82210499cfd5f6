import random

import pytest

from algokit.sampledata import random_data, reverse_data, sorted_data
from algokit.sorting import (
    bubble_sort,
    hybrid_quick_sort,
    insertion_sort,
    insertion_sort_shift,
    median_of_three_quick_sort,
    merge_sort,
    quick_sort,
    random_pivot_quick_sort,
    selection_sort,
)

SAMPLE = [9, 1, 6, 8, 4, 3, 2, 0]


def _seeded(fn):
    return lambda data: fn(data, random.Random(7))


SORTS = [
    selection_sort,
    insertion_sort,
    insertion_sort_shift,
    bubble_sort,
    quick_sort,
    _seeded(random_pivot_quick_sort),
    _seeded(hybrid_quick_sort),
    median_of_three_quick_sort,
    merge_sort,
]


def test_sorts_sample():
    expected = [0, 1, 2, 3, 4, 6, 8, 9]
    work = [list(SAMPLE) for _ in range(9)]
    assert selection_sort(work[0]) is None
    assert insertion_sort(work[1]) is None
    assert insertion_sort_shift(work[2]) is None
    assert bubble_sort(work[3]) is None
    assert quick_sort(work[4]) is None
    assert random_pivot_quick_sort(work[5], random.Random(7)) is None
    assert hybrid_quick_sort(work[6], random.Random(7)) is None
    assert median_of_three_quick_sort(work[7]) is None
    assert merge_sort(work[8]) is None
    assert all(result == expected for result in work)


@pytest.mark.parametrize("data", [[], [5], [2, 1], [1, 2], [3, 3, 3]])
def test_sorts_small_inputs(data):
    expected = sorted(data)
    work = [list(data) for _ in range(9)]
    selection_sort(work[0])
    insertion_sort(work[1])
    insertion_sort_shift(work[2])
    bubble_sort(work[3])
    quick_sort(work[4])
    random_pivot_quick_sort(work[5], random.Random(7))
    hybrid_quick_sort(work[6], random.Random(7))
    median_of_three_quick_sort(work[7])
    merge_sort(work[8])
    assert all(result == expected for result in work)


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("n", [50, 450, 1000])
def test_sorts_random_data(sort, n):
    original = random_data(n, random.Random(n))
    work = list(original)
    sort(work)
    assert work == sorted(original)


@pytest.mark.parametrize("sort", SORTS)
def test_sorts_reverse_data(sort):
    work = reverse_data(600)
    sort(work)
    assert work == sorted_data(600)


@pytest.mark.parametrize("sort", SORTS)
def test_sorts_already_sorted(sort):
    work = sorted_data(500)
    sort(work)
    assert work == sorted_data(500)


def test_sorts_many_duplicates():
    rng = random.Random(3)
    original = [rng.randrange(4) for _ in range(700)]
    expected = sorted(original)
    work = [list(original) for _ in range(9)]
    selection_sort(work[0])
    insertion_sort(work[1])
    insertion_sort_shift(work[2])
    bubble_sort(work[3])
    quick_sort(work[4])
    random_pivot_quick_sort(work[5], random.Random(7))
    hybrid_quick_sort(work[6], random.Random(7))
    median_of_three_quick_sort(work[7])
    merge_sort(work[8])
    assert all(result == expected for result in work)


def test_merge_sort_source_example():
    data = [1, 3, 5, 7, 9, 8, 6, 4, 2]
    merge_sort(data)
    assert data == list(range(1, 10))


def test_bubble_sort_custom_comparator_descending():
    data = list(SAMPLE)
    bubble_sort(data, lambda a, b: b - a)
    assert data == sorted(SAMPLE, reverse=True)


def test_bubble_sort_floats():
    data = [3.5, -1.25, 2.0, 0.5]
    bubble_sort(data)
    assert data == sorted([3.5, -1.25, 2.0, 0.5])


def test_bubble_sort_is_stable():
    data = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    bubble_sort(data, lambda x, y: x[0] - y[0])
    assert data == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana"]
    work = list(words)
    median_of_three_quick_sort(work)
    assert work == sorted(words)


def test_random_pivot_is_deterministic_with_seed():
    original = random_data(300, random.Random(1))
    first, second = list(original), list(original)
    random_pivot_quick_sort(first, random.Random(42))
    random_pivot_quick_sort(second, random.Random(42))
    assert first == second == sorted(original)


def test_sort_preserves_multiset():
    original = random_data(250, random.Random(9))
    work = list(original)
    hybrid_quick_sort(work)
    assert len(work) == len(original)
    assert all(a <= b for a, b in zip(work, work[1:]))
    assert sorted(work) == sorted(original)