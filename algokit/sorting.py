"""Comparison sorts that rearrange a list in place.

Every function here sorts its argument in ascending order and returns
None, in the manner of ``list.sort``.
"""

from __future__ import annotations

import random
from typing import Any, Callable, MutableSequence, Optional

Comparator = Callable[[Any, Any], int]

_INSERTION_CUTOFF = 200


def _natural_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def selection_sort(data: MutableSequence[Any]) -> None:
    """Repeatedly move the smallest remaining element to the front."""
    n = len(data)
    for i in range(n - 1):
        smallest = min(range(i, n), key=data.__getitem__)
        data[smallest], data[i] = data[i], data[smallest]


def insertion_sort(data: MutableSequence[Any]) -> None:
    """Grow a sorted prefix, shifting larger elements right to make room."""
    for i in range(1, len(data)):
        remember = data[i]
        j = i - 1
        while j >= 0 and remember < data[j]:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = remember


def _shift_insert(data: MutableSequence[Any], lo: int, hi: int) -> None:
    """Insertion sort of data[lo..hi], growing a sorted suffix with block moves."""
    for i in range(hi - 1, lo - 1, -1):
        remember = data[i]
        j = i
        while j < hi and remember > data[j + 1]:
            j += 1
        if j == i:
            continue
        data[i:j] = data[i + 1:j + 1]
        data[j] = remember


def insertion_sort_shift(data: MutableSequence[Any]) -> None:
    """Insertion sort working from the back, moving runs as whole slices."""
    _shift_insert(data, 0, len(data) - 1)


def bubble_sort(data: MutableSequence[Any], cmp: Optional[Comparator] = None) -> None:
    """Swap adjacent pairs that cmp reports as out of order.

    cmp(a, b) returns a positive number when a belongs after b; by default
    elements are compared with their own ordering.
    """
    cmp = cmp if cmp is not None else _natural_cmp
    n = len(data)
    for i in range(n - 1):
        for j in range(1, n - i):
            if cmp(data[j - 1], data[j]) > 0:
                data[j - 1], data[j] = data[j], data[j - 1]


def _partition_last(data: MutableSequence[Any], lo: int, hi: int) -> int:
    """Partition data[lo..hi] around data[hi]; return the pivot's final index."""
    pivot = data[hi]
    i, j = lo - 1, hi
    while True:
        i += 1
        while data[i] < pivot:
            i += 1
        j -= 1
        while j > lo and data[j] > pivot:
            j -= 1
        if i >= j:
            break
        data[i], data[j] = data[j], data[i]
    data[i], data[hi] = data[hi], data[i]
    return i


def _partition_median(data: MutableSequence[Any], lo: int, hi: int) -> int:
    """Partition data[lo..hi] around the median of its first, middle and last."""
    center = lo + ((hi - lo + 1) >> 1)
    if data[lo] > data[center]:
        data[lo], data[center] = data[center], data[lo]
    if data[lo] > data[hi]:
        data[lo], data[hi] = data[hi], data[lo]
    if data[center] > data[hi]:
        data[center], data[hi] = data[hi], data[center]
    data[center], data[hi - 1] = data[hi - 1], data[center]

    pivot = data[hi - 1]
    i, j = lo, hi - 1
    while True:
        i += 1
        while data[i] < pivot:
            i += 1
        j -= 1
        while data[j] > pivot:
            j -= 1
        if i >= j:
            break
        data[i], data[j] = data[j], data[i]
    data[i], data[hi - 1] = data[hi - 1], data[i]
    return i


def _quick(
    data: MutableSequence[Any],
    partition: Callable[[MutableSequence[Any], int, int], int],
    rng: Optional[random.Random] = None,
    cutoff: int = 1,
) -> None:
    pending = [(0, len(data) - 1)]
    while pending:
        lo, hi = pending.pop()
        n = hi - lo + 1
        if n <= 1:
            continue
        if n <= cutoff:
            _shift_insert(data, lo, hi)
            continue
        if rng is not None:
            t = lo + rng.randrange(n)
            data[t], data[hi] = data[hi], data[t]
        p = partition(data, lo, hi)
        pending.append((lo, p - 1))
        pending.append((p + 1, hi))


def quick_sort(data: MutableSequence[Any]) -> None:
    """Quicksort taking the last element of each range as its pivot."""
    _quick(data, _partition_last)


def random_pivot_quick_sort(
    data: MutableSequence[Any], rng: Optional[random.Random] = None
) -> None:
    """Quicksort with a pivot chosen at random in each range."""
    _quick(data, _partition_last, rng if rng is not None else random.Random())


def hybrid_quick_sort(
    data: MutableSequence[Any], rng: Optional[random.Random] = None
) -> None:
    """Random-pivot quicksort that hands ranges of 200 or fewer to insertion sort."""
    _quick(
        data,
        _partition_last,
        rng if rng is not None else random.Random(),
        cutoff=_INSERTION_CUTOFF,
    )


def median_of_three_quick_sort(data: MutableSequence[Any]) -> None:
    """Median-of-three quicksort with insertion sort for ranges of 200 or fewer."""
    _quick(data, _partition_median, cutoff=_INSERTION_CUTOFF)


def _merge(data: MutableSequence[Any], low: int, mid: int, high: int) -> None:
    merged = []
    left, right = low, mid + 1
    while left <= mid and right <= high:
        if data[left] < data[right]:
            merged.append(data[left])
            left += 1
        else:
            merged.append(data[right])
            right += 1
    merged.extend(data[left:mid + 1])
    merged.extend(data[right:high + 1])
    data[low:high + 1] = merged


def _merge_sort(data: MutableSequence[Any], low: int, high: int) -> None:
    if high - low < 1:
        return
    mid = (low + high) // 2
    _merge_sort(data, low, mid)
    _merge_sort(data, mid + 1, high)
    _merge(data, low, mid, high)


def merge_sort(data: MutableSequence[Any]) -> None:
    """Top-down merge sort."""
    _merge_sort(data, 0, len(data) - 1)