"""Directed graphs stored as adjacency lists, with depth- and breadth-first search."""

from __future__ import annotations

from collections import deque
from typing import Iterator


def vertex_name(index: int) -> str:
    """Letter naming a vertex: 0 is 'A', 1 is 'B', and so on."""
    return chr(ord("A") + index)


class Graph:
    """Directed graph on vertices 0..vertex_count-1.

    Neighbours are kept in the order their edges were added.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adj):
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, a: int, b: int) -> None:
        """Add an edge from a to b, after a's existing edges."""
        self._check(a)
        self._check(b)
        self._adj[a].append(b)

    def neighbours(self, vertex: int) -> list[int]:
        self._check(vertex)
        return list(self._adj[vertex])

    def _dfs_from(self, start: int, visited: list[bool]) -> Iterator[int]:
        visited[start] = True
        yield start
        stack = [iter(self._adj[start])]
        while stack:
            for vertex in stack[-1]:
                if not visited[vertex]:
                    visited[vertex] = True
                    yield vertex
                    stack.append(iter(self._adj[vertex]))
                    break
            else:
                stack.pop()

    def dfs(self) -> list[int]:
        """Depth-first visit order over every vertex, starting each unvisited one in turn."""
        visited = [False] * len(self._adj)
        order: list[int] = []
        for vertex in range(len(self._adj)):
            if not visited[vertex]:
                order.extend(self._dfs_from(vertex, visited))
        return order

    def bfs(self, start: int) -> list[int]:
        """Breadth-first visit order of the vertices reachable from start."""
        self._check(start)
        visited = [False] * len(self._adj)
        visited[start] = True
        order = [start]
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for vertex in self._adj[current]:
                if not visited[vertex]:
                    visited[vertex] = True
                    order.append(vertex)
                    queue.append(vertex)
        return order

    def bfs_tree(self, start: int) -> tuple[list[int], list[int]]:
        """Edge-count distances and BFS parents from start.

        Unreachable vertices have distance and parent -1; start is its own parent.
        """
        self._check(start)
        dist = [-1] * len(self._adj)
        parent = [-1] * len(self._adj)
        dist[start] = 0
        parent[start] = start
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for vertex in self._adj[current]:
                if dist[vertex] == -1:
                    dist[vertex] = dist[current] + 1
                    parent[vertex] = current
                    queue.append(vertex)
        return dist, parent

    def shortest_path(self, start: int, target: int) -> list[int]:
        """Vertices on a fewest-edge path from start to target, both included."""
        self._check(target)
        dist, parent = self.bfs_tree(start)
        if dist[target] == -1:
            raise ValueError(f"vertex {target} is not reachable from {start}")
        path = [target]
        while parent[path[-1]] != path[-1]:
            path.append(parent[path[-1]])
        path.reverse()
        return path