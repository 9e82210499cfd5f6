"""Sample inputs for sorting benchmarks and a simple CPU timer."""

from __future__ import annotations

import random
import sys
import time
from typing import Iterable, Optional, TextIO


def sorted_data(n: int) -> list[int]:
    """Return the ascending sequence 1..n."""
    return list(range(1, n + 1))


def random_data(n: int, rng: Optional[random.Random] = None) -> list[int]:
    """Return n random integers, each in the range 0..n-1."""
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(n) for _ in range(n)]


def reverse_data(n: int) -> list[int]:
    """Return the descending sequence n..1."""
    return list(range(n, 0, -1))


def format_array(data: Iterable[int]) -> str:
    """Format integers five columns wide, ten to a line."""
    parts = []
    for count, value in enumerate(data, 1):
        parts.append(f"{value:5d}")
        if count % 10 == 0:
            parts.append("\n")
    return "".join(parts)


class Timer:
    """Context manager that reports the CPU time spent inside its block."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream
        self.start: Optional[float] = None
        self.elapsed: Optional[float] = None

    def _out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def __enter__(self) -> "Timer":
        print(">> start_timer", file=self._out())
        self.start = time.process_time()
        return self

    def __exit__(self, *args) -> bool:
        self.elapsed = time.process_time() - self.start
        print(f">> elapsed : {self.elapsed:.6f}", file=self._out())
        return False