"""Linear, self-organising and bracketing binary search over lists."""

from __future__ import annotations

from typing import Any, MutableSequence, Optional, Sequence


def linear_search(values: Sequence[Any], key: Any) -> Optional[int]:
    """Return the index of the first element equal to key, or None."""
    return next((i for i, value in enumerate(values) if value == key), None)


def move_to_front_search(values: MutableSequence[Any], key: Any) -> Optional[int]:
    """Find key and move it to the front of values.

    Returns 0, the key's new index, when found, or None when absent.
    The other elements keep their relative order.
    """
    index = linear_search(values, key)
    if index is None:
        return None
    values.insert(0, values.pop(index))
    return 0


def binary_search(values: Sequence[Any], key: Any) -> int:
    """Narrow a bracket over sorted values and return its upper end.

    The result is the first index holding an element greater than key,
    clamped to the range 1..len(values)-1 (0 for a single element).
    """
    if not values:
        raise ValueError("sequence is empty")
    lo, hi = 0, len(values) - 1
    while lo + 1 < hi:
        mid = (lo + hi) // 2
        if values[mid] > key:
            hi = mid
        else:
            lo = mid
    return hi