"""Maximum contiguous subarray sum, solved three ways."""

from __future__ import annotations

import argparse
import random
import time
from itertools import accumulate
from typing import Iterable, Optional, Sequence


def _as_list(values: Iterable[int]) -> list[int]:
    seq = list(values)
    if not seq:
        raise ValueError("sequence is empty")
    return seq


def max_sum(values: Iterable[int]) -> int:
    """Brute force: try every start position, O(n^2)."""
    seq = _as_list(values)
    return max(max(accumulate(seq[start:])) for start in range(len(seq)))


def _span_max(seq: Sequence[int], lo: int, hi: int) -> int:
    if lo == hi:
        return seq[lo]
    mid = (lo + hi) // 2
    left = max(accumulate(reversed(seq[lo:mid + 1])))
    right = max(accumulate(seq[mid + 1:hi + 1]))
    single = max(_span_max(seq, lo, mid), _span_max(seq, mid + 1, hi))
    return max(left + right, single)


def fast_max_sum(values: Iterable[int]) -> int:
    """Divide and conquer, O(n log n)."""
    seq = _as_list(values)
    return _span_max(seq, 0, len(seq) - 1)


def fastest_max_sum(values: Iterable[int]) -> int:
    """Linear scan keeping the best sum ending at each position."""
    seq = _as_list(values)
    best = seq[0]
    running = 0
    for value in seq:
        running = max(0, running) + value
        best = max(best, running)
    return best


def alternating_sign_data(n: int, rng: Optional[random.Random] = None) -> list[int]:
    """Random values below 100; those at indices divisible by 3 are negated."""
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(100) * (-1 if i % 3 == 0 else 1) for i in range(n)]


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare maximum subarray sum algorithms.")
    parser.add_argument("--size", type=int, default=100000, help="number of values")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    data = alternating_sign_data(args.size, random.Random(args.seed))
    solvers = [
        ("maxSum", max_sum),
        ("fastMaxSum", fast_max_sum),
        ("fastestMaxSum", fastest_max_sum),
    ]
    timings = []
    for label, solver in solvers:
        started = time.process_time()
        print(f"{label:<16}: {solver(data)}")
        timings.append((label, time.process_time() - started))
    for label, seconds in timings:
        print(f"{label:<16}: {seconds:.6f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())