"""Greedy algorithms: meeting rooms, fractional knapsack, change and job pay."""

from __future__ import annotations

from typing import Iterable


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Count the most (start, end) meetings one room can hold, taking earliest-ending first."""
    earliest = 0
    count = 0
    for start, end in sorted(meetings, key=lambda meeting: meeting[1]):
        if earliest <= start:
            earliest = end
            count += 1
    return count


def fractional_knapsack(items: Iterable[tuple[int, int]], capacity: float) -> float:
    """Best value from (weight, value) items when items may be split."""
    items = list(items)
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight, _ in items):
        raise ValueError("item weights must be positive")

    total = 0.0
    remaining = capacity
    for weight, value in sorted(items, key=lambda item: item[1] / item[0], reverse=True):
        if remaining <= 0:
            break
        if weight <= remaining:
            total += value
            remaining -= weight
        else:
            total += value * remaining / weight
            remaining = 0
    return total


def make_change(coins: Iterable[int], price: int, paid: int) -> dict[int, int]:
    """Split paid - price into coins, largest first.

    Returns a mapping from each coin, in descending order, to how many
    of it are handed back.
    """
    coins = sorted(coins, reverse=True)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    change = paid - price
    if change < 0:
        raise ValueError("amount paid is less than the price")
    counts = {}
    for coin in coins:
        counts[coin], change = divmod(change, coin)
    if change:
        raise ValueError("change cannot be made with these coins")
    return counts


def max_pay(works: Iterable[tuple[int, int]]) -> int:
    """Total pay from (deadline, pay) jobs, filling each day from the last backwards.

    Each day takes the best-paying unused job whose deadline is that day or later.
    """
    remaining = [list(work) for work in works]
    total = 0
    last_day = max((deadline for deadline, _ in remaining), default=0)
    for day in range(last_day, 0, -1):
        candidates = [work for work in remaining if work[0] >= day and work[1] > 0]
        if not candidates:
            continue
        best = max(candidates, key=lambda work: work[1])
        total += best[1]
        best[1] = 0
    return total