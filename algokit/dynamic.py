"""Dynamic programming: 0-1 knapsack, chip placement and longest common subsequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class KnapsackResult:
    """Best total value and the indices of the items that reach it."""

    value: int
    chosen: tuple[int, ...]


def knapsack(items: Iterable[tuple[int, int]], capacity: int) -> KnapsackResult:
    """Solve the 0-1 knapsack for (weight, value) items within capacity."""
    items = list(items)
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight, _ in items):
        raise ValueError("item weights must be positive")

    table = [[0] * (capacity + 1)]
    for weight, value in items:
        prev = table[-1]
        table.append([
            prev[j] if j < weight else max(prev[j], prev[j - weight] + value)
            for j in range(capacity + 1)
        ])

    chosen = []
    j = capacity
    for i in range(len(items), 0, -1):
        if table[i][j] != table[i - 1][j]:
            chosen.append(i - 1)
            j -= items[i - 1][0]
    return KnapsackResult(table[-1][capacity], tuple(reversed(chosen)))


# Placement types: 1 = first column, 2 = middle, 3 = last, 4 = first and last.
# For each type placed at the next position, the types allowed at this one.
_ALLOWED = {
    0: (1, 2, 3, 4),
    1: (2, 3),
    2: (1, 3, 4),
    3: (1, 2),
    4: (2,),
}


def _gain(choice: int, row: Sequence[int]) -> int:
    if choice == 4:
        return row[0] + row[2]
    return row[choice - 1]


def place_chips(rows: Iterable[Sequence[int]]) -> tuple[int, list[int]]:
    """Place one chip pattern per row of three values, maximising the total.

    Adjacent rows may not reuse a column. Returns the best total and the
    pattern chosen for each row (1, 2, 3 for a single column, 4 for the
    first and last columns together).
    """
    rows = [tuple(row) for row in rows]
    if any(len(row) != 3 for row in rows):
        raise ValueError("each row needs exactly three values")
    if any(value < 0 for row in rows for value in row):
        raise ValueError("chip values must not be negative")
    if not rows:
        return 0, []

    table: list[dict[int, tuple[int, int]]] = []
    for n, row in enumerate(rows):
        prev = table[n - 1] if n else None
        entry = {}
        for following, choices in _ALLOWED.items():
            best = None
            for choice in choices:
                value = (prev[choice][0] if prev else 0) + _gain(choice, row)
                if best is None or value > best[0]:
                    best = (value, choice)
            entry[following] = best
        table.append(entry)

    path = []
    following = 0
    for entry in reversed(table):
        following = entry[following][1]
        path.append(following)
    path.reverse()
    return table[-1][0][0], path


def _lcs_table(a: Sequence, b: Sequence) -> list[list[int]]:
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a, 1):
        for j, y in enumerate(b, 1):
            if x == y:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i][j - 1], table[i - 1][j])
    return table


def lcs_length(a: Sequence, b: Sequence) -> int:
    """Length of the longest common subsequence of a and b."""
    return _lcs_table(a, b)[len(a)][len(b)]


def lcs(a: str, b: str) -> str:
    """One longest common subsequence of two strings."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    found = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            found.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j] == table[i][j - 1]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(found))