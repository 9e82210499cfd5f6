"""Single-source shortest paths by Dijkstra's algorithm, and a subway route finder."""

from __future__ import annotations

import argparse
import sys
from operator import itemgetter
from typing import Mapping, Optional, Sequence

from .heap import BinaryHeap

INFINITY = float("inf")


def dijkstra(
    adjacency: Sequence[Mapping[int, float]], source: int
) -> tuple[list[float], list[Optional[int]]]:
    """Shortest distances and parents from source.

    adjacency[u] maps each neighbour v to the weight of the edge u -> v;
    a weight of 0 means there is no edge. Unreachable vertices keep an
    infinite distance and a parent of None; source is its own parent.
    """
    graph = [dict(edges) for edges in adjacency]
    n = len(graph)
    if not 0 <= source < n:
        raise ValueError(f"source {source} is out of range")
    for u, edges in enumerate(graph):
        for v, weight in edges.items():
            if not 0 <= v < n:
                raise ValueError(f"edge ({u}, {v}) has a vertex out of range")
            if weight < 0:
                raise ValueError(f"edge ({u}, {v}) has a negative weight")

    dist = [INFINITY] * n
    parent: list[Optional[int]] = [None] * n
    dist[source] = 0.0
    parent[source] = source
    heap = BinaryHeap([(0.0, source)], key=itemgetter(0), min_heap=True)
    while heap:
        cost, u = heap.pop()
        if cost > dist[u]:
            continue
        for v, weight in graph[u].items():
            if weight == 0:
                continue
            next_cost = cost + weight
            if next_cost < dist[v]:
                dist[v] = next_cost
                parent[v] = u
                heap.push((next_cost, v))
    return dist, parent


def path_to(parent: Sequence[Optional[int]], target: int) -> list[int]:
    """Follow parent links back from target; return the path from the root to target."""
    if not 0 <= target < len(parent):
        raise ValueError(f"target {target} is out of range")
    if parent[target] is None:
        raise ValueError(f"vertex {target} is not reachable")
    path = [target]
    while parent[path[-1]] != path[-1]:
        step = parent[path[-1]]
        if step is None or len(path) > len(parent):
            raise ValueError("parent links do not lead back to a root")
        path.append(step)
    path.reverse()
    return path


class SubwayMap:
    """Named stations joined by weighted, directed links."""

    def __init__(self, names: Sequence[str], adjacency: Sequence[Mapping[int, float]]) -> None:
        if len(names) != len(adjacency):
            raise ValueError("need exactly one name per station")
        self.names = list(names)
        self.adjacency = [dict(edges) for edges in adjacency]
        self._index: dict[str, int] = {}
        for i, name in enumerate(self.names):
            self._index.setdefault(name, i)

    @classmethod
    def from_text(cls, text: str) -> "SubwayMap":
        """Read 'V E', then E lines 'a b time', then V whitespace-separated station names."""
        tokens = text.split()
        if len(tokens) < 2:
            raise ValueError("missing station and link counts")
        try:
            count, link_count = int(tokens[0]), int(tokens[1])
        except ValueError as exc:
            raise ValueError("station and link counts must be integers") from exc
        if count < 0 or link_count < 0:
            raise ValueError("counts must not be negative")
        body = tokens[2:]
        if len(body) < 3 * link_count + count:
            raise ValueError("input ends too early")
        adjacency: list[dict[int, float]] = [{} for _ in range(count)]
        for k in range(link_count):
            a_text, b_text, weight_text = body[3 * k:3 * k + 3]
            try:
                a, b, weight = int(a_text), int(b_text), float(weight_text)
            except ValueError as exc:
                raise ValueError(f"bad link on line {k + 1}") from exc
            if not (0 <= a < count and 0 <= b < count):
                raise ValueError(f"link ({a}, {b}) has a station out of range")
            adjacency[a][b] = weight
        names = body[3 * link_count:3 * link_count + count]
        return cls(names, adjacency)

    def index(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"no station named {name!r}") from None

    def route(self, start: str, end: str) -> tuple[float, list[str]]:
        """Travel time and the stations passed through from start to end."""
        source = self.index(start)
        target = self.index(end)
        dist, parent = dijkstra(self.adjacency, source)
        return dist[target], [self.names[i] for i in path_to(parent, target)]


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Find the quickest route between subway stations.")
    parser.add_argument("map_file", help="file with the link list and station names")
    args = parser.parse_args(argv)

    with open(args.map_file, encoding="utf-8") as handle:
        subway = SubwayMap.from_text(handle.read())

    for line in sys.stdin:
        words = line.split()
        if not words:
            continue
        if len(words) != 2:
            print("enter a start and an end station", file=sys.stderr)
            return 1
        start, end = words
        for label, name in (("start", start), ("end", end)):
            if name not in subway._index:
                print(f"{label} station {name} does not exist", file=sys.stderr)
                return 1
        try:
            distance, stations = subway.route(start, end)
        except ValueError:
            print(f"{end} cannot be reached from {start}", file=sys.stderr)
            return 1
        print(f"{start} -> {end} travel time : {distance:.1f}")
        print("-----route-----")
        for station in stations:
            print(station)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())