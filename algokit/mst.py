"""Minimum spanning trees by Prim's and Kruskal's algorithms."""

from __future__ import annotations

from operator import itemgetter
from typing import Iterable

from .heap import BinaryHeap

Edge = tuple[int, int, int]


def _name_to_index(letter: str) -> int:
    return ord(letter) - ord("A")


class DisjointSet:
    """Union-find over the elements 0..size-1."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._height = [0] * size

    def find(self, v: int) -> int:
        """Return the representative of v's set."""
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of a and b; return False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._height[ra] > self._height[rb]:
            ra, rb = rb, ra
        self._parent[ra] = rb
        if self._height[ra] == self._height[rb]:
            self._height[rb] += 1
        return True


def parse_edges(text: str) -> tuple[int, list[Edge]]:
    """Read 'V E' then E lines such as 'AB 10'; return V and (a, b, weight) edges."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("missing vertex and edge counts")
    try:
        vertex_count, edge_count = int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise ValueError("vertex and edge counts must be integers") from exc
    body = tokens[2:]
    if len(body) < 2 * edge_count:
        raise ValueError(f"expected {edge_count} edges")
    edges = []
    for pair, weight in zip(body[0:2 * edge_count:2], body[1:2 * edge_count:2]):
        if len(pair) != 2:
            raise ValueError(f"bad vertex pair {pair!r}")
        try:
            cost = int(weight)
        except ValueError as exc:
            raise ValueError(f"bad weight {weight!r}") from exc
        edges.append((_name_to_index(pair[0]), _name_to_index(pair[1]), cost))
    return vertex_count, edges


def _check_edges(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    edges = list(edges)
    for a, b, _ in edges:
        if not (0 <= a < vertex_count and 0 <= b < vertex_count):
            raise ValueError(f"edge ({a}, {b}) has a vertex out of range")
    return edges


def prim(vertex_count: int, edges: Iterable[Edge]) -> tuple[list[Edge], int]:
    """Spanning tree grown from vertex 0.

    Returns (parent, vertex, weight) edges ordered by vertex, and their total weight.
    """
    edges = _check_edges(vertex_count, edges)
    if vertex_count == 0:
        return [], 0
    adjacency: list[dict[int, int]] = [{} for _ in range(vertex_count)]
    for a, b, weight in edges:
        adjacency[a][b] = weight
        adjacency[b][a] = weight

    best: list[float] = [float("inf")] * vertex_count
    parent = [-1] * vertex_count
    visited = [False] * vertex_count
    best[0] = 0
    heap = BinaryHeap([(0, 0)], key=itemgetter(0), min_heap=True)
    while heap:
        weight, u = heap.pop()
        if visited[u] or weight > best[u]:
            continue
        visited[u] = True
        for v, cost in adjacency[u].items():
            if not visited[v] and cost < best[v]:
                best[v] = cost
                parent[v] = u
                heap.push((cost, v))

    tree = [(parent[v], v, best[v]) for v in range(vertex_count) if parent[v] != -1]
    return tree, sum(weight for _, _, weight in tree)


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> tuple[list[Edge], int]:
    """Spanning forest from the lightest edges that join separate components.

    Returns the chosen (a, b, weight) edges in the order taken, and their total weight.
    """
    edges = _check_edges(vertex_count, edges)
    sets = DisjointSet(vertex_count)
    heap = BinaryHeap(edges, key=itemgetter(2), min_heap=True)
    tree = []
    while heap:
        a, b, weight = heap.pop()
        if sets.union(a, b):
            tree.append((a, b, weight))
    return tree, sum(weight for _, _, weight in tree)